# MIT License (see LICENSE)
import pytest
from gravity_sim.cli import build_parser, main


def test_main_prints_reports(capsys):
    assert main(["--steps", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 12
    assert lines[0] == "p-1,0, v0∠0  p1,0, v0∠0  p1,1, v0∠0"
    assert all(line.count("∠") == 3 for line in lines)


def test_digits_option(capsys):
    main(["--steps", "1", "--digits", "30"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    first_x = lines[-1].split(",")[0]
    assert first_x.startswith("p-0.99999999999999")


@pytest.mark.parametrize("argv", [["--steps", "0"], ["--steps", "abc"], ["--digits", "-3"]])
def test_rejects_bad_values(argv):
    with pytest.raises(SystemExit):
        build_parser().parse_args(argv)


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    args = build_parser().parse_args([])
    assert args.log_level == "DEBUG"
    assert args.steps == 1_000_000


def test_invalid_environment_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(SystemExit):
        main(["--steps", "1"])
