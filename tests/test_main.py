import logging

import pytest

from logger_config import configure_logging, verbosity_to_level
from main import main


def test_prints_result(write_input, london_text, capsys):
    assert main([write_input(london_text)]) == 0
    out, err = capsys.readouterr()
    assert out == "shortest Hamiltonian path cost: 605\n"
    assert err == ""


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("fatal error: no such file or directory")


def test_parse_error(write_input, capsys):
    assert main([write_input("foo bar\n")]) == 1
    assert "fatal error: could not parse line: foo bar" in capsys.readouterr().err


def test_wrong_argument_count(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1
    assert "fatal error" in capsys.readouterr().err

    with pytest.raises(SystemExit) as exc_info:
        main(["a.txt", "b.txt"])
    assert exc_info.value.code == 1


def test_validate_rejects_incomplete_graph(write_input, capsys):
    assert main(["--validate", write_input("A to B = 1\nA to C = 2\n")]) == 1
    assert "invalid input" in capsys.readouterr().err


def test_validate_accepts_complete_graph(write_input, london_text, capsys):
    assert main(["--validate", write_input(london_text)]) == 0
    assert capsys.readouterr().out.endswith("605\n")


def test_no_options_write_files(write_input, london_text, tmp_path, capsys):
    for option in ("--draw", "--log-file"):
        with pytest.raises(SystemExit) as exc_info:
            main([option, str(tmp_path / "out"), write_input(london_text)])
        assert exc_info.value.code == 1
    assert not (tmp_path / "out").exists()
    assert "unrecognized arguments" in capsys.readouterr().err


def test_verbose_logs_go_to_stderr(write_input, london_text, capsys):
    assert main(["-vv", write_input(london_text)]) == 0
    out, err = capsys.readouterr()
    assert out == "shortest Hamiltonian path cost: 605\n"
    assert "Parsed graph with 3 nodes" in err
    configure_logging(0)


@pytest.mark.parametrize("verbosity, level", [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG),
                                              (5, logging.DEBUG)])
def test_verbosity_to_level(verbosity, level):
    assert verbosity_to_level(verbosity) == level


def test_configure_logging_keeps_base_config():
    config = configure_logging(1)
    assert config["root"]["level"] == "INFO"
    assert list(config["handlers"]) == ["to_console"]
    configure_logging(0)
