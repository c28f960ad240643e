"""Sequential, validating prompts rendered with Rich."""

from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.prompt import Prompt

from .naming import to_title_case, validate_project_name, validate_project_title

__all__ = ["ask_validated", "prompt_project_name", "prompt_project_title"]

_console = Console(soft_wrap=True, highlight=False)

Validator = Callable[[str], "bool | str"]


def _ask(question: str, default: str | None = None) -> str:
    if default is None:
        return Prompt.ask(question, console=_console)
    return Prompt.ask(question, console=_console, default=default)


def ask_validated(question: str, validate: Validator, default: str | None = None) -> str:
    """Ask ``question`` until ``validate`` accepts the answer.

    Rejection reasons are echoed below the prompt and the same question is
    asked again.
    """
    while True:
        answer = _ask(question, default)
        result = validate(answer)
        if result is True:
            return answer
        _console.print(f"[bold red]✗[/]  {result}")


def prompt_project_name(initial: str | None = None) -> str:
    """Prompt for the project name (and output directory)."""
    return ask_validated("Project name", validate_project_name, default=initial)


def prompt_project_title(project_name: str) -> str:
    """Prompt for the display title, defaulting to the title-cased name."""
    return ask_validated(
        "Formatted project title",
        validate_project_title,
        default=to_title_case(project_name) or None,
    )
