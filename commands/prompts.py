"""Terminal prompts built on click."""

from typing import Protocol, runtime_checkable

import click


@runtime_checkable
class Prompter(Protocol):
    """What the session needs from the terminal."""

    def select(self, message: str, options: list[str]) -> int: ...

    def text(self, message: str) -> str: ...

    def echo(self, message: str = "", fg: str | None = None) -> None: ...


class ClickPrompter:
    """Reads user choices and prints messages through click.

    The session only talks to this interface, so tests can replace it with
    a scripted prompter.
    """

    def select(self, message: str, options: list[str]) -> int:
        """Show a numbered menu and return the chosen index.

        Args:
            message: Prompt shown under the menu.
            options: Labels in display order.

        Returns:
            Zero-based index of the chosen option.
        """
        click.echo()
        for number, option in enumerate(options, start=1):
            click.echo(f"  {click.style(str(number), bold=True)}. {option}")
        choice = click.prompt(
            message, type=click.IntRange(1, len(options)), prompt_suffix=": "
        )
        return choice - 1

    def text(self, message: str) -> str:
        """Ask for free text."""
        return click.prompt(message, type=str, prompt_suffix=": ")

    def echo(self, message: str = "", fg: str | None = None) -> None:
        """Print a (optionally colored) message."""
        click.secho(message, fg=fg)
