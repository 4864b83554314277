import builtins

import pytest

from monthdays.cli import EXIT_INVALID_INPUT, main


def test_cli_month_argument(capsys) -> None:
    assert main(["January"]) == 0
    assert capsys.readouterr().out.strip() == "January has 31 days."


def test_cli_leap_year(capsys) -> None:
    assert main(["february", "--year", "2020"]) == 0
    assert capsys.readouterr().out.strip() == "February has 29 days in a leap year."


def test_cli_invalid_month_exits_2(capsys) -> None:
    assert main(["Feb"]) == EXIT_INVALID_INPUT
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid month" in captured.err


def test_cli_invalid_year_exits_2(capsys) -> None:
    assert main(["april", "--year", "not-a-year"]) == EXIT_INVALID_INPUT
    assert "Invalid year" in capsys.readouterr().err


def test_cli_all_months(capsys) -> None:
    assert main(["--all", "--year", "2004"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 12
    assert lines[1] == "February has 29 days in a leap year."
    assert lines[-1] == "December has 31 days."


def test_cli_prompts_when_month_missing(monkeypatch, capsys) -> None:
    answers = iter(["FEbruary", "2021"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "February has 28 days in a non-leap year."


def test_cli_prompt_blank_year_means_no_year(monkeypatch, capsys) -> None:
    answers = iter(["february", "   "])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "February has 28 days (29 in a leap year)."


def test_cli_log_level_is_case_insensitive(capsys) -> None:
    assert main(["march", "--log-level", "debug"]) == 0
    assert capsys.readouterr().out.strip() == "March has 31 days."


def test_cli_unknown_log_level_is_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["january", "--log-level", "bogus"])
    assert exc_info.value.code == 2
    assert "--log-level" in capsys.readouterr().err
