"""
Terminal prompts for the installer, backed by questionary.
"""

import questionary
from questionary import Style

from smoothie.cli.output import console, print_info, print_note, print_warning
from smoothie.installer import Prompter

PROMPT_STYLE = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("instruction", "fg:#858585 italic"),
    ]
)


class QuestionaryPrompter(Prompter):
    """Prompter that asks on the terminal and prints with rich."""

    def select_one(self, label: str, options: dict[str, str]) -> str | None:
        return questionary.select(
            label,
            choices=[questionary.Choice(title, value=value) for value, title in options.items()],
            style=PROMPT_STYLE,
        ).ask()

    def select_many(self, label: str, options: dict[str, str], hint: str = "") -> list[str]:
        selected = questionary.checkbox(
            label,
            choices=[questionary.Choice(title, value=value) for value, title in options.items()],
            instruction=hint or None,
            style=PROMPT_STYLE,
        ).ask()
        return selected or []

    def notify(self, message: str) -> None:
        if "\n" in message:
            print_note(message)
        else:
            print_info(message)

    def warn(self, message: str) -> None:
        print_warning(message)


class ScriptedPrompter(QuestionaryPrompter):
    """Prompter for non-interactive runs: every question is cancelled."""

    def select_one(self, label: str, options: dict[str, str]) -> str | None:
        console.print(f"[dim]{label} (no answer, not a terminal)[/dim]")
        return None

    def select_many(self, label: str, options: dict[str, str], hint: str = "") -> list[str]:
        console.print(f"[dim]{label} (no answer, not a terminal)[/dim]")
        return []
