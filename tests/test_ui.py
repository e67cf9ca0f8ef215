import pytest

from drillrun.ui import style, success, warn


def test_style_without_arguments_returns_plain_text():
    assert style("plain") == "plain"


def test_style_bold_wraps_in_escape_codes():
    assert style("x", "bold") == "\x1b[1mx\x1b[0m"


def test_style_keeps_text_and_resets():
    styled = style("hello", "blue", "bold")
    assert "hello" in styled
    assert styled.endswith("\x1b[0m")
    assert styled.startswith("\x1b[")


def test_style_accepts_non_strings():
    assert "12" in style(12, "blue")


def test_style_rejects_unknown_name():
    with pytest.raises(ValueError):
        style("x", "sparkly")


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = warn("boom")
    out = capsys.readouterr().out
    assert out == line + "\n"
    assert "!" in out
    assert "boom" in out
    assert "⚠️" not in out


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("careful")
    out = capsys.readouterr().out
    assert "⚠️" in out
    assert "careful" in out


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran it")
    out = capsys.readouterr().out
    assert "✓" in out
    assert "Successfully ran it" in out
    assert "✅" not in out


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("done")
    out = capsys.readouterr().out
    assert "✅" in out
    assert "done" in out