import pytest

from mytorch.cli import ParsedArgs, parse_args, usage


def test_new_network_and_training():
    parsed = parse_args(["-n", "64", "32", "3", "-t", "100", "a.txt"])
    assert parsed.new_network_config == [64, 32, 3]
    assert parsed.train_mode is True
    assert parsed.predict_mode is False
    assert parsed.data_size == 100
    assert parsed.chessboard_files == ["a.txt"]


def test_defaults_when_loading():
    parsed = parse_args(["-l", "net.txt"])
    assert parsed.load_file == "net.txt"
    assert parsed.activation_function == "tanhf"
    assert parsed.data_size == 10000
    assert parsed.learning_rate == pytest.approx(0.005)
    assert parsed.chessboard_files == []
    assert parsed == ParsedArgs(load_file="net.txt")


def test_options_after_files_are_still_read():
    parsed = parse_args(["-l", "net", "-p", "5", "d1", "d2", "-s", "out"])
    assert parsed.predict_mode is True
    assert parsed.data_size == 5
    assert parsed.chessboard_files == ["d1", "d2"]
    assert parsed.save_file == "out"


def test_rate_and_activation():
    parsed = parse_args(["-n", "4", "2", "-r", "0.01", "-m", "sigmoid"])
    assert parsed.learning_rate == pytest.approx(0.01)
    assert parsed.activation_function == "sigmoid"
    assert parsed.new_network_config == [4, 2]


def test_attached_argument():
    parsed = parse_args(["-l", "x", "-t50", "data"])
    assert parsed.data_size == 50
    assert parsed.chessboard_files == ["data"]


def test_help_prints_usage(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["-h"])
    assert info.value.code == 0
    assert capsys.readouterr().out.startswith("Usage:")


def test_usage_exits_zero(capsys):
    with pytest.raises(SystemExit) as info:
        usage()
    assert info.value.code == 0
    assert "-n IN_LAYER" in capsys.readouterr().out


def test_unknown_option_shows_usage():
    with pytest.raises(SystemExit) as info:
        parse_args(["-x"])
    assert info.value.code == 0


def test_missing_argument_shows_usage():
    with pytest.raises(SystemExit) as info:
        parse_args(["-l"])
    assert info.value.code == 0


def test_training_without_file_shows_usage():
    with pytest.raises(SystemExit) as info:
        parse_args(["-n", "64", "3", "-t", "10"])
    assert info.value.code == 0


def test_bad_number_raises():
    with pytest.raises(ValueError):
        parse_args(["-t", "abc", "file"])
    with pytest.raises(ValueError):
        parse_args(["-n", "64", "many"])