"""
Tests for the command-line entry point.
"""

import argparse
import io

import main


def make_args(**overrides):
    values = {
        "expression": None,
        "strict_parens": False,
        "right_assoc_pow": False,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class TestMain:
    """Tests for main.main()."""

    def test_one_shot_expression(self, capsys):
        assert main.main(make_args(expression="1+2*3")) == 0
        assert capsys.readouterr().out.strip() == "7.0"

    def test_one_shot_right_assoc(self, capsys):
        assert main.main(make_args(expression="2^2^3", right_assoc_pow=True)) == 0
        assert capsys.readouterr().out.strip() == "256.0"

    def test_one_shot_error(self, capsys):
        assert main.main(make_args(expression="2x")) == 1
        assert "Invalid token" in capsys.readouterr().err

    def test_one_shot_strict(self, capsys):
        assert main.main(make_args(expression="(1+2", strict_parens=True)) == 1
        assert "Unbalanced parentheses" in capsys.readouterr().err

    def test_session_from_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("define=x*2\nf(4)\nexit\n9\n"))
        assert main.main(make_args()) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["f(x) = x*2", "8.0"]


def test_read_lines_stops_at_eof():
    lines = list(main.read_lines(io.StringIO("a\nb\n"), "> "))
    assert lines == ["a\n", "b\n"]
