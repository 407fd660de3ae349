"""Command-line option parsing."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from itertools import takewhile
from typing import NoReturn

DEFAULT_ACTIVATION = "tanhf"
DEFAULT_DATA_SIZE = 10000
DEFAULT_LEARNING_RATE = 0.005

_USAGE_LINES = (
    "Usage: mytorch [...] = MANDATORY / () = Optional",
    " [-n IN_LAYER (HIDDEN_LAYERS...) OUT_LAYER | -l LOADFILE]",
    " (-t (to train the network) | -p (to check how the network is performing))",
    " (-s SAVEFILE)",
    " [FILE (File containing dataset)]",
    f" (-r LEARNING_RATE (default {DEFAULT_LEARNING_RATE}))",
    ' (-m ACTIVATION FUNCTION (either "sigmoid" or "tanhf"))',
)

USAGE = "\n".join(_USAGE_LINES)

_WITH_ARGUMENT = frozenset("nltpsrm")


@dataclass
class ParsedArgs:
    """Settings gathered from the command line."""

    new_network_config: list[int] = field(default_factory=list)
    load_file: str = ""
    train_mode: bool = False
    predict_mode: bool = False
    save_file: str = ""
    chessboard_files: list[str] = field(default_factory=list)
    activation_function: str = DEFAULT_ACTIVATION
    data_size: int = DEFAULT_DATA_SIZE
    learning_rate: float = DEFAULT_LEARNING_RATE


def usage() -> NoReturn:
    """Write the usage text to standard output and leave with status 0."""
    out = sys.stdout
    for line in _USAGE_LINES:
        out.write(line)
        out.write("\n")
    out.flush()
    sys.exit(0)


def _to_int(text: str, option: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid value for -{option}: {text!r}") from None


def _to_float(text: str, option: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"invalid value for -{option}: {text!r}") from None


def _apply(parsed: ParsedArgs, option: str, value: str) -> None:
    if option == "l":
        parsed.load_file = value
    elif option == "t":
        parsed.train_mode = True
        parsed.data_size = _to_int(value, option)
    elif option == "p":
        parsed.predict_mode = True
        parsed.data_size = _to_int(value, option)
    elif option == "s":
        parsed.save_file = value
    elif option == "r":
        parsed.learning_rate = _to_float(value, option)
    elif option == "m":
        parsed.activation_function = value


def parse_args(argv=None) -> ParsedArgs:
    """Parse ``argv`` (without the program name) into a :class:`ParsedArgs`.

    Options may appear before or after the dataset files. ``-n`` takes every
    following argument up to the next one starting with ``-``.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    parsed = ParsedArgs()
    operands: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--":
            operands.extend(args[i + 1:])
            break
        if len(arg) < 2 or not arg.startswith("-"):
            operands.append(arg)
            i += 1
            continue
        i += 1
        option, attached = arg[1], arg[2:]
        if option not in _WITH_ARGUMENT:
            usage()
        if attached:
            value = attached
        elif i < len(args):
            value = args[i]
            i += 1
        else:
            usage()
        if option == "n":
            if not attached:
                i -= 1
                while i < len(args) and not args[i].startswith("-"):
                    parsed.new_network_config.append(_to_int(args[i], option))
                    i += 1
        else:
            _apply(parsed, option, value)

    if parsed.train_mode or parsed.predict_mode:
        if not operands:
            usage()
        parsed.chessboard_files = list(
            takewhile(lambda operand: not operand.startswith("-"), operands)
        )
    return parsed