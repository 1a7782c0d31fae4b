"""Enums and question definitions for CLI options."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from create_builtby_app.core.report import Reporter

Answer = str | bool
Answers = dict[str, Answer]


class QuestionKind(str, Enum):
    """How a question is asked."""

    TEXT = "text"
    CONFIRM = "confirm"
    SELECT = "select"


@dataclass(frozen=True)
class Question:
    """A single template question.

    ``default`` is either a constant or a callable of the answers collected so
    far. ``validate`` receives the raw text of TEXT and SELECT answers.
    """

    name: str
    message: str
    kind: QuestionKind = QuestionKind.TEXT
    default: Answer | Callable[[Answers], Answer] | None = None
    validate: Callable[[str], bool] | None = None
    error: str = "Invalid value"
    choices: tuple[str, ...] = ()

    def default_for(self, answers: Answers) -> Answer | None:
        if callable(self.default):
            return self.default(answers)
        return self.default

    def is_valid(self, value: str) -> bool:
        if self.choices and value not in self.choices:
            return False
        return self.validate is None or self.validate(value)


class Template(str, Enum):
    """Available project templates."""

    DESKTOP = "desktop"
    WEB = "web"

    @property
    def label(self) -> str:
        labels: dict[Template, str] = {
            Template.DESKTOP: "Desktop App",
            Template.WEB: "Web App",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[Template, str] = {
            Template.DESKTOP: "Tauri + React + TypeScript desktop application",
            Template.WEB: "Astro + Cloudflare + tRPC + better-auth full-stack template",
        }
        return descriptions[self]

    @property
    def repo(self) -> str:
        from create_builtby_app.cli.templates import TEMPLATE_MODULES

        return TEMPLATE_MODULES[self].REPO

    @property
    def questions(self) -> tuple[Question, ...]:
        from create_builtby_app.cli.templates import TEMPLATE_MODULES

        return TEMPLATE_MODULES[self].QUESTIONS

    def transform(self, project_dir: Path, answers: Answers, reporter: Reporter) -> None:
        """Customize a freshly cloned copy of this template in place."""
        from create_builtby_app.cli.templates import TEMPLATE_MODULES

        TEMPLATE_MODULES[self].transform(project_dir, answers, reporter)


class PackageManager(str, Enum):
    """Package managers the generated project can be installed with."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"

    @property
    def label(self) -> str:
        return self.value

    @property
    def run_command(self) -> str:
        """Prefix for running a package.json script."""
        if self in (PackageManager.NPM, PackageManager.PNPM):
            return f"{self.value} run"
        return self.value
