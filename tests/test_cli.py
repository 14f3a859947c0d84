import pandas as pd
import pytest

from gravsim import cli


@pytest.mark.parametrize(
    "text, expected",
    [("25", 25), ("0", 0), ("+7", 7), (" 3", 3), (None, 10)],
)
def test_parse_count_accepts_numbers(text, expected):
    assert cli.parse_count(text, 10) == expected


@pytest.mark.parametrize(
    "text, message",
    [
        ("abc", "Invalid number"),
        ("", "Invalid number"),
        ("12abc", "Trailing characters after number"),
        ("1.5", "Trailing characters after number"),
        ("99999999999", "Number out of range"),
        ("-3", "Negative"),
    ],
)
def test_parse_count_falls_back_to_default(text, message, capsys):
    assert cli.parse_count(text, 10, "number of bodies") == 10

    err = capsys.readouterr().err
    assert "[warning]" in err
    assert message in err


@pytest.mark.parametrize(
    "text, expected",
    [("0.5", 0.5), ("2", 2.0), ("1e-2", 0.01), (".25", 0.25), ("-0.5", -0.5), (None, 1.0)],
)
def test_parse_step_accepts_real_numbers(text, expected):
    assert cli.parse_step(text) == pytest.approx(expected)


@pytest.mark.parametrize(
    "text, message",
    [
        ("fast", "Invalid number"),
        ("2.5s", "Trailing characters after number"),
        ("1e999", "Number out of range"),
        ("nan", "Invalid number"),
    ],
)
def test_parse_step_falls_back_to_default(text, message, capsys):
    assert cli.parse_step(text) == 1.0

    assert message in capsys.readouterr().err


def test_fractional_step_is_not_truncated():
    args = cli.build_parser().parse_args(["4", "2", "0.25"])

    assert cli.config_from_args(args).dt == 0.25


def test_main_runs_and_reports(capsys):
    assert cli.main(["3", "2", "0.5", "--no-plot", "--seed", "1"]) == 0

    out = capsys.readouterr().out
    assert "Bodies: 3" in out
    assert "Iterations: 2" in out
    assert "Integration step: 0.5" in out
    assert out.count("  m = ") == 6
    assert "Optionally specify arguments" not in out


def test_main_without_arguments_prints_usage(capsys):
    assert cli.main(["--no-plot", "--quiet", "--seed", "2"]) == 0

    out = capsys.readouterr().out
    assert "Optionally specify arguments" in out
    assert "Bodies: 10" in out
    assert "Iterations: 100" in out


def test_main_recovers_from_bad_arguments(capsys):
    assert cli.main(["lots", "2", "--no-plot", "--quiet"]) == 0

    captured = capsys.readouterr()
    assert "Bodies: 10" in captured.out
    assert "Invalid number: lots" in captured.err


def test_main_quiet_suppresses_body_lines(capsys):
    cli.main(["2", "3", "--no-plot", "--quiet"])

    assert "  m = " not in capsys.readouterr().out


def test_main_writes_history(tmp_path):
    path = tmp_path / "history.csv"

    cli.main(["3", "2", "--no-plot", "--quiet", "--seed", "4", "--history", str(path)])

    df = pd.read_csv(path)
    assert len(df) == 6
    assert list(df["iteration"].unique()) == [1, 2]


def test_main_with_plot(capsys):
    assert cli.main(["2", "2", "--quiet", "--delay", "0"]) == 0


def test_main_accepts_negative_scientific_step(capsys):
    assert cli.main(["3", "2", "-1e-3", "--no-plot", "--quiet"]) == 0

    captured = capsys.readouterr()
    assert "Integration step: -0.001" in captured.out
    assert "[warning]" not in captured.err


def test_main_recovers_from_dash_led_junk(capsys):
    assert cli.main(["-abc", "--no-plot", "--quiet"]) == 0

    captured = capsys.readouterr()
    assert "Bodies: 10" in captured.out
    assert "Invalid number: -abc" in captured.err


def test_main_ignores_extra_positionals(capsys):
    assert cli.main(["3", "2", "1", "4", "--no-plot", "--quiet"]) == 0

    captured = capsys.readouterr()
    assert "Bodies: 3" in captured.out
    assert "Iterations: 2" in captured.out
    assert "Ignoring extra argument: 4" in captured.err


def test_positionals_keep_command_line_order():
    args, positionals = cli.parse_command_line(["-2.5e1", "--seed", "1", "7", "--quiet", "0.5"])

    assert positionals == ["-2.5e1", "7", "0.5"]
    assert cli.config_from_args(args, positionals).seed == 1


def test_dash_led_step_after_options():
    args, positionals = cli.parse_command_line(["--no-plot", "4", "5", "-0.25"])

    cfg = cli.config_from_args(args, positionals)
    assert (cfg.n_bodies, cfg.iterations, cfg.dt) == (4, 5, -0.25)


@pytest.mark.parametrize(
    "flags, message",
    [
        (["--seed", "x1"], "Invalid number: x1"),
        (["--delay", "soon"], "Invalid number: soon"),
        (["--delay", "-1"], "Negative delay"),
    ],
)
def test_bad_flag_values_fall_back(flags, message, capsys):
    assert cli.main(["2", "1", "--no-plot", "--quiet"] + flags) == 0

    assert message in capsys.readouterr().err
