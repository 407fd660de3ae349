import numpy as np
import pytest

from mytorch.app import main, process
from mytorch.cli import ParsedArgs
from mytorch.network import NeuralNetwork

START = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def _dataset(path, count=3):
    lines = []
    for index in range(count):
        checkmate = "True" if index % 2 == 0 else "False"
        lines += [
            "RES: 1-0",
            f"CHECKMATE: {checkmate}",
            f"FEN: {START} w KQkq - 0 1",
            *["filler"] * 9,
            "",
        ]
    path.write_text("\n".join(lines) + "\n")
    return path


def test_main_requires_network(capsys):
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 0
    assert "You must specify" in capsys.readouterr().err


def test_main_rejects_activation(capsys):
    with pytest.raises(SystemExit):
        main(["-n", "64", "3", "-m", "softmax"])
    assert "Activation function not supported" in capsys.readouterr().err


def test_main_creates_and_saves(tmp_path, capsys):
    out = tmp_path / "net.txt"
    assert main(["-n", "64", "3", "-m", "sigmoid", "-s", str(out)]) == 0
    assert "Creating new network with config: 64 3 " in capsys.readouterr().out
    loaded = NeuralNetwork([2, 2], "relu")
    loaded.load_from_file(out)
    assert loaded.config == [64, 3]
    assert loaded.activation_name == "sigmoid"


def test_main_trains(tmp_path, capsys):
    data = _dataset(tmp_path / "games.txt")
    out = tmp_path / "net.txt"
    status = main(["-n", "64", "8", "3", "-m", "sigmoid", "-t", "5", str(data), "-s", str(out)])
    assert status == 0
    assert "Training done" in capsys.readouterr().out
    assert out.read_text().splitlines()[1] == "64 8 3 "


def test_main_missing_load_file(tmp_path):
    assert main(["-l", str(tmp_path / "absent.txt")]) == 84


def test_main_bad_number():
    assert main(["-n", "64", "x"]) == 84


def test_process_predict(tmp_path, capsys):
    data = _dataset(tmp_path / "games.txt")
    network = NeuralNetwork([64, 3], "sigmoid", 0.005)
    network.weights = [np.zeros((64, 3), dtype=np.float32)]
    parsing = ParsedArgs(predict_mode=True, chessboard_files=[str(data)], data_size=10)
    process(network, parsing)
    assert "exploit: 0/3" in capsys.readouterr().out


def test_process_missing_file_continues(tmp_path, capsys):
    network = NeuralNetwork([64, 3], "sigmoid", 0.005)
    parsing = ParsedArgs(
        train_mode=True, chessboard_files=[str(tmp_path / "absent.txt")], data_size=1
    )
    process(network, parsing)
    captured = capsys.readouterr()
    assert "Error opening file" in captured.err
    assert "Training done" in captured.out