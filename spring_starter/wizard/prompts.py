"""Interactive prompt surface.

The wizard talks to the user only through the :class:`Prompter` protocol.
:class:`RichPrompter` is the terminal implementation built on ``rich.prompt``;
tests drive the wizard with a scripted double instead.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from spring_starter.utils import console as default_console
from spring_starter.utils import print_section, print_warning


class Prompter(Protocol):
    def question(self, label: str, default: Optional[str] = None, required: bool = False) -> str:
        """Ask for free text. Required questions never return an empty string."""
        ...

    def options(self, label: str, choices: Sequence[str], default: Optional[str] = None) -> str:
        """Ask the user to pick exactly one of *choices*; return the chosen label."""
        ...

    def checklist(self, label: str, choices: Sequence[str]) -> list[str]:
        """Ask the user to tick zero or more of *choices*; return the chosen labels."""
        ...

    def confirm(self, label: str, default: bool = True) -> bool:
        ...


def parse_selection(answer: str, count: int) -> list[int]:
    """Parse a checklist answer such as ``"1, 3 4"`` into zero-based indexes.

    Indexes come back sorted and de-duplicated. A blank answer selects
    nothing.

    Raises:
        ValueError: If a token is not a number between 1 and *count*.
    """
    tokens = answer.replace(",", " ").split()
    indexes: set[int] = set()
    for token in tokens:
        if not token.isdigit() or not 1 <= int(token) <= count:
            raise ValueError(f"'{token}' is not a number between 1 and {count}")
        indexes.add(int(token) - 1)
    return sorted(indexes)


class RichPrompter:
    """Terminal prompter using Rich for rendering and input."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or default_console

    def _print_choices(self, choices: Sequence[str]) -> None:
        width = len(str(len(choices)))
        for number, choice in enumerate(choices, start=1):
            self.console.print(f"  [cyan]{str(number).rjust(width)}[/cyan]. {choice}")

    def question(self, label: str, default: Optional[str] = None, required: bool = False) -> str:
        while True:
            if default is None:
                answer = Prompt.ask(label, console=self.console)
            else:
                answer = Prompt.ask(label, default=default, console=self.console)
            answer = (answer or "").strip()
            if answer or not required:
                return answer
            print_warning(f"{label} is required.")

    def options(self, label: str, choices: Sequence[str], default: Optional[str] = None) -> str:
        if not choices:
            raise ValueError(f"No options available for '{label}'")
        print_section(label)
        self._print_choices(choices)
        numbers = [str(number) for number in range(1, len(choices) + 1)]
        if default in choices:
            answer = Prompt.ask(
                "Choice",
                choices=numbers,
                default=str(list(choices).index(default) + 1),
                show_choices=False,
                console=self.console,
            )
        else:
            answer = Prompt.ask("Choice", choices=numbers, show_choices=False, console=self.console)
        return choices[int(answer) - 1]

    def checklist(self, label: str, choices: Sequence[str]) -> list[str]:
        print_section(label)
        self._print_choices(choices)
        while True:
            answer = Prompt.ask(
                "Numbers separated by commas (blank for none)",
                default="",
                show_default=False,
                console=self.console,
            )
            try:
                return [choices[index] for index in parse_selection(answer, len(choices))]
            except ValueError as exc:
                print_warning(str(exc))

    def confirm(self, label: str, default: bool = True) -> bool:
        return Confirm.ask(label, default=default, console=self.console)
