"""Tests for the click-based prompter."""

from unittest.mock import patch

from commands.prompts import ClickPrompter, Prompter


def test_select_returns_zero_based_index(capsys):
    """Test select() prints numbered options and converts the choice."""
    with patch("commands.prompts.click.prompt", return_value=2) as prompt:
        index = ClickPrompter().select("Pick one", ["First", "Second"])

    assert index == 1
    out = capsys.readouterr().out
    assert "First" in out
    assert "Second" in out
    choice_type = prompt.call_args.kwargs["type"]
    assert choice_type.min == 1
    assert choice_type.max == 2


def test_text_returns_answer():
    """Test text() passes the answer through."""
    with patch("commands.prompts.click.prompt", return_value="Valorant"):
        assert ClickPrompter().text("Game") == "Valorant"


def test_click_prompter_satisfies_prompter_protocol():
    """Test the click prompter offers every method the session calls."""
    assert isinstance(ClickPrompter(), Prompter)
