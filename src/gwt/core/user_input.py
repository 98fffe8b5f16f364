"""Interactive input abstraction.

Commands never read stdin directly; they ask ctx.user_input for a line.
This keeps confirmation logic testable without a terminal.
"""

from abc import ABC, abstractmethod

import click


class UserInput(ABC):
    """Source of interactive answers from the user."""

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """Show prompt and return one line of user input (may be empty)."""
        ...


def is_affirmative(answer: str) -> bool:
    """Return True only for 'y' or 'yes', ignoring case and surrounding whitespace."""
    return answer.strip().lower() in ("y", "yes")


class RealUserInput(UserInput):
    """Reads answers from the terminal via click."""

    def ask(self, prompt: str) -> str:
        # Prompt goes to stderr to keep stdout reserved for machine output
        return click.prompt(prompt, default="", show_default=False, err=True)
