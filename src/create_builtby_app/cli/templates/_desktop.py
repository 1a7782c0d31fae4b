"""Tauri desktop app template."""

from __future__ import annotations

from pathlib import Path

from create_builtby_app.cli._types import Answers, Question
from create_builtby_app.cli.templates._base import app_name_question, is_bundle_identifier
from create_builtby_app.core.naming import to_kebab_case, to_snake_case
from create_builtby_app.core.replace import Replacement, replace_in_files
from create_builtby_app.core.report import Reporter

REPO = "builtby-win/desktop"

FILES: tuple[str, ...] = (
    "package.json",
    "src-tauri/Cargo.toml",
    "src-tauri/Cargo.lock",
    "src-tauri/tauri.conf.json",
    "src-tauri/src/main.rs",
    "src-tauri/src/db.rs",
    "src-tauri/src/bin/export-bindings.rs",
    "scripts/release.sh",
    "scripts/release-debug.sh",
    "README.md",
)


def _default_bundle_identifier(answers: Answers) -> str:
    app = to_kebab_case(str(answers.get("appName") or "app")).replace("-", "")
    return f"com.example.{app}"


QUESTIONS: tuple[Question, ...] = (
    app_name_question("focus-hook"),
    Question(
        name="productName",
        message="Product name (window title)",
        default=lambda answers: str(answers.get("appName") or ""),
    ),
    Question(
        name="bundleIdentifier",
        message="Bundle identifier (e.g., com.example.myapp)",
        default=_default_bundle_identifier,
        validate=is_bundle_identifier,
        error="Must be reverse DNS format",
    ),
)


def replacements(answers: Answers) -> list[Replacement]:
    kebab = to_kebab_case(str(answers["appName"]))
    return [
        Replacement("my-app", kebab),
        Replacement("my_app", to_snake_case(str(answers["appName"]))),
        Replacement("My App", str(answers["productName"])),
        Replacement("com.example.myapp", str(answers["bundleIdentifier"])),
        Replacement('"schemes": ["my-app"]', f'"schemes": ["{kebab}"]'),
    ]


def transform(project_dir: Path, answers: Answers, reporter: Reporter) -> None:
    replace_in_files(project_dir, FILES, replacements(answers), reporter)
