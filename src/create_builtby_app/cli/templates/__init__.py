"""Template modules for project customization."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from create_builtby_app.cli._types import Answers, Question, Template
from create_builtby_app.cli.templates import _desktop, _web
from create_builtby_app.core.report import Reporter


class TemplateModule(Protocol):
    """Protocol for template modules: where to clone from, what to ask, how to customize."""

    REPO: str
    QUESTIONS: tuple[Question, ...]

    def transform(self, project_dir: Path, answers: Answers, reporter: Reporter) -> None: ...


TEMPLATE_MODULES: dict[Template, TemplateModule] = {
    Template.DESKTOP: _desktop,
    Template.WEB: _web,
}
