"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import sys
from typing import TypeVar

from rich.console import Console
from rich.markup import escape
from simple_term_menu import TerminalMenu

from create_builtby_app.cli._types import (
    Answer,
    Answers,
    PackageManager,
    Question,
    QuestionKind,
    Template,
)
from create_builtby_app.core.errors import InvalidAnswerError

_console = Console()

T = TypeVar("T")

_YES_NO: dict[str, bool] = {"": True, "y": True, "yes": True, "n": False, "no": False}


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _print_answered(question: str, display: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {escape(display)}")
    _print_bar()


def _select(question: str, options: Sequence[T], labels: list[str], default: int = 0) -> T | None:
    """Display a clack-style selection prompt and return the chosen option, or None if escaped."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        cursor_index=default,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        return None

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {escape(lbl)}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{escape(lbl)}[/]")
    _print_bar()

    return selected


def _confirm(question: str, default: bool = True) -> bool | None:
    """Display a clack-style yes/no prompt, re-asking on anything but y/yes/n/no.

    Returns None on Ctrl-C or end of input.
    """
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()
    lines = 2

    suffix = " [Y/n] " if default else " [y/N] "
    while True:
        _console.print("[dim]│[/]  ", end="")
        try:
            answer = input(suffix).strip().lower()
        except (EOFError, KeyboardInterrupt):
            return None
        lines += 1

        if answer in _YES_NO:
            break
        _console.print("[dim]│[/]  [yellow]Please answer y or n[/]")
        lines += 1

    result = default if answer == "" else _YES_NO[answer]

    # Overwrite the ◆ question + │ bar + │ [Y/n] input lines
    _clear_lines(lines)
    _print_answered(question, "Yes" if result else "No")

    return result


def _text(
    question: str,
    default: str = "",
    validate: Callable[[str], bool] | None = None,
    error: str = "Invalid value",
) -> str | None:
    """Display a clack-style free text prompt, re-asking until the answer validates.

    An empty answer takes ``default``. Returns None on Ctrl-C or end of input.
    """
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()
    lines = 2

    hint = f" ({default}) " if default else " "
    while True:
        _console.print("[dim]│[/]  ", end="")
        try:
            answer = input(hint).strip()
        except (EOFError, KeyboardInterrupt):
            return None
        lines += 1

        value = answer or default
        if validate is None or validate(value):
            break
        _console.print(f"[dim]│[/]  [yellow]{escape(error)}[/]")
        lines += 1

    _clear_lines(lines)
    _print_answered(question, value)

    return value


def _ask(q: Question, answers: Answers) -> Answer | None:
    default = q.default_for(answers)

    if q.kind is QuestionKind.CONFIRM:
        return _confirm(q.message, default=bool(default) if default is not None else True)

    if q.kind is QuestionKind.SELECT:
        choices = list(q.choices)
        index = choices.index(default) if default in choices else 0
        return _select(q.message, choices, choices, default=index)

    return _text(q.message, default=str(default or ""), validate=q.is_valid, error=q.error)


def _check_preset(q: Question, value: Answer) -> Answer:
    if q.kind is QuestionKind.CONFIRM:
        if not isinstance(value, bool):
            raise InvalidAnswerError(q.name, str(value), "expected yes or no")
        return value

    text = str(value)
    if not q.is_valid(text):
        error = f"expected one of {', '.join(q.choices)}" if q.choices else q.error
        raise InvalidAnswerError(q.name, text, error)
    return text


def collect_answers(
    questions: Sequence[Question], preset: Mapping[str, Answer] | None = None
) -> Answers:
    """Ask ``questions`` in order, taking answers from ``preset`` where given.

    Preset answers are validated and echoed rather than prompted. Collection
    stops at the first cancelled prompt, so a cancelled run returns fewer
    answers than there are questions.

    Raises:
        InvalidAnswerError: A preset answer fails its question's validation.
    """
    preset = preset or {}
    answers: Answers = {}

    for q in questions:
        if q.name in preset:
            value = _check_preset(q, preset[q.name])
            display = ("Yes" if value else "No") if isinstance(value, bool) else value
            _print_answered(q.message, display)
        else:
            answer = _ask(q, answers)
            if answer is None:
                break
            value = answer
        answers[q.name] = value

    return answers


def prompt_project_name() -> str | None:
    """Prompt for the project directory name."""
    return _text("Project name", validate=bool, error="Required")


def prompt_template() -> Template | None:
    """Prompt user to choose a project template."""
    templates = list(Template)
    labels = [f"{t.label} - {t.description}" for t in templates]
    return _select("Which template?", templates, labels)


def prompt_package_manager() -> PackageManager | None:
    """Prompt user to choose the package manager used to install dependencies."""
    managers = list(PackageManager)
    labels = [m.label for m in managers]
    return _select("Package manager", managers, labels)
