"""Loading chess positions and scoring a network on them."""

from __future__ import annotations

import random
from collections.abc import Iterator, MutableSequence, Sequence

import numpy as np

BOARD_SIZE = 8
SQUARES = BOARD_SIZE * BOARD_SIZE
PIECE_SCALE = 12

_PIECES = {
    "R": 1, "N": 2, "B": 3, "Q": 4, "K": 5, "P": 6,
    "r": 7, "n": 8, "b": 9, "q": 10, "k": 11, "p": 12,
}

_SKIPPED_LINES = 9


def parse_fen(fen: str) -> np.ndarray:
    """Turn the board part of a FEN string into 64 values scaled to [0, 1]."""
    board = np.zeros(SQUARES, dtype=np.float32)
    row = col = 0

    def place(value: int) -> None:
        nonlocal col
        index = row * BOARD_SIZE + col
        if not 0 <= index < SQUARES:
            raise ValueError(f"FEN describes more than {SQUARES} squares: {fen!r}")
        board[index] = value
        col += 1

    for char in fen:
        if char == " ":
            break
        if char == "/":
            row += 1
            col = 0
        elif char.isdigit():
            for _ in range(int(char)):
                place(0)
        else:
            place(_PIECES.get(char, 0))
    return board / np.float32(PIECE_SCALE)


def _second_word(line: str, previous: str) -> str:
    words = line.split()
    if len(words) >= 2:
        return words[1]
    if words:
        return words[0]
    return previous


def parse_chess_file(filename, training_steps, examples_per_step):
    """Read labelled positions from ``filename``.

    Returns the board vectors and the matching one-hot outputs
    ``[checkmate, draw, other]``. Stops after
    ``training_steps * examples_per_step`` examples.
    """
    total = training_steps * examples_per_step
    inputs: list[np.ndarray] = []
    outputs: list[np.ndarray] = []
    token = ""
    with open(filename, encoding="utf-8") as handle:
        lines: Iterator[str] = (line.rstrip("\n") for line in handle)
        for line in lines:
            if not line or "RES" not in line:
                continue
            token = _second_word(line, token)
            draw = token == "1/2-1/2"

            token = _second_word(next(lines, ""), token)
            if token == "True":
                checkmate = True
            elif token == "False":
                checkmate = False
            else:
                continue

            token = _second_word(next(lines, ""), token)
            board = parse_fen(token)
            for _ in range(_SKIPPED_LINES):
                next(lines, "")

            inputs.append(board)
            outputs.append(
                np.array(
                    [checkmate, draw, not checkmate and not draw], dtype=np.float32
                )
            )
            if len(inputs) >= total:
                break
    return inputs, outputs


def print_board(board, expected) -> None:
    """Print a board eight values per line followed by its expected outputs."""
    values = [f"{float(v):g} " for v in board]
    for start in range(0, len(values), BOARD_SIZE):
        print("".join(values[start:start + BOARD_SIZE]))
    for value in expected:
        print(f"{float(value):g}")
    print()


def exploit(network, inputs: Sequence, outputs: Sequence) -> int:
    """Count the examples whose every output the network gets on the right side of 0.5."""
    count = 0
    for board, expected in zip(inputs, outputs):
        network.propagate_forward(board)
        predicted = np.asarray(network.output)
        target = np.asarray(expected)
        hits = ((predicted > 0.5) & (target == 1)) | ((predicted < 0.5) & (target == 0))
        if hits.all():
            count += 1
    print(f"exploit: {count}/{len(inputs)}")
    return count


def shuffle(inputs: MutableSequence, outputs: MutableSequence, rng=None) -> None:
    """Shuffle ``inputs`` and ``outputs`` in place with the same permutation."""
    if len(inputs) != len(outputs):
        raise ValueError("inputs and outputs must have the same length")
    rng = rng if rng is not None else random.Random()
    pairs = list(zip(inputs, outputs))
    rng.shuffle(pairs)
    inputs[:] = [board for board, _ in pairs]
    outputs[:] = [expected for _, expected in pairs]