# tests/test_main.py
"""
Tests for the predsets command-line interface.
"""

import logging
import sys

import pytest

from predsets import __version__
from predsets.bounds import ENV_VAR
from predsets.main import (
    EXIT_ERROR,
    EXIT_FALSE,
    EXIT_INFRA,
    EXIT_OK,
    _configure_logging,
    main,
)


@pytest.fixture(autouse=True)
def _no_env_bound(monkeypatch):
    monkeypatch.delenv(ENV_VAR, raising=False)


class TestEval:

    def test_true_quantifier(self, capsys):
        assert main(["eval", "forall({2, 4, 6}, even)"]) == EXIT_OK
        assert capsys.readouterr().out == "true\n"

    def test_false_quantifier(self, capsys):
        assert main(["eval", "forall({1, 2, 3}, even)"]) == EXIT_FALSE
        assert capsys.readouterr().out == "false\n"

    def test_membership_probes(self, capsys):
        code = main(["eval", "map({1, 2, 3}, x * 2)", "-m", "4", "--member", "5"])
        assert code == EXIT_OK
        assert capsys.readouterr().out == "4: true\n5: false\n"

    def test_set_without_probes_warns(self, capsys):
        assert main(["eval", "{1}"]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "--member" in captured.err

    def test_syntax_error(self, capsys):
        assert main(["eval", "forall({1}, even"]) == EXIT_ERROR
        assert "error" in capsys.readouterr().err

    def test_evaluation_error(self, capsys):
        code = main(["eval", "filter({1}, x % 0 == 0)", "-m", "1"])
        assert code == EXIT_ERROR
        assert "division by zero" in capsys.readouterr().err

    def test_oversized_integer_literal(self, capsys):
        if not getattr(sys, "get_int_max_str_digits", lambda: 0)():
            pytest.skip("interpreter has no integer string conversion limit")
        digits = "1" * (sys.get_int_max_str_digits() + 1)
        assert main(["eval", "{" + digits + "}", "-m", "1"]) == EXIT_ERROR
        assert "integer literal too long" in capsys.readouterr().err


class TestBoundOption:

    def test_flag_limits_search(self):
        assert main(["--bound", "50", "eval", "exists([1..100], x == 75)"]) == EXIT_FALSE
        assert main(["--bound", "100", "eval", "exists([1..100], x == 75)"]) == EXIT_OK

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv(ENV_VAR, "50")
        assert main(["eval", "exists([1..100], x == 75)"]) == EXIT_FALSE

    def test_flag_overrides_env_var(self, monkeypatch):
        monkeypatch.setenv(ENV_VAR, "50")
        assert main(["--bound", "100", "eval", "exists([1..100], x == 75)"]) == EXIT_OK

    def test_invalid_flag(self, capsys):
        assert main(["--bound", "0", "eval", "forall({}, even)"]) == EXIT_INFRA
        assert "Invalid bound" in capsys.readouterr().err

    def test_invalid_env_var(self, monkeypatch):
        monkeypatch.setenv(ENV_VAR, "plenty")
        assert main(["eval", "forall({}, even)"]) == EXIT_INFRA


class TestCheck:

    def test_valid(self, capsys):
        assert main(["check", "union({1}, filter([1..9], odd))"]) == EXIT_OK
        assert capsys.readouterr().out == "ok\n"

    def test_invalid(self, capsys):
        assert main(["check", "union({1})"]) == EXIT_ERROR
        assert capsys.readouterr().out == ""

    def test_does_not_evaluate(self, capsys):
        assert main(["check", "forall([1..3], x // 0 == 1)"]) == EXIT_OK


class TestTopLevel:

    def test_no_command_prints_help(self, capsys):
        assert main([]) == EXIT_INFRA
        assert "usage: predsets" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as info:
            main(["--version"])
        assert info.value.code == 0
        assert __version__ in capsys.readouterr().out

    @pytest.mark.parametrize("verbosity, level", [
        (0, logging.WARNING),
        (1, logging.INFO),
        (2, logging.DEBUG),
        (5, logging.DEBUG),
    ])
    def test_configure_logging(self, verbosity, level):
        _configure_logging(verbosity)
        assert logging.getLogger("predsets").level == level
