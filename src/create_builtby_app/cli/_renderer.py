"""Orchestrates cloning and customizing a template on disk."""

from __future__ import annotations

import json
from pathlib import Path

from create_builtby_app.cli._clone import clone_template
from create_builtby_app.cli._types import Answers, Template
from create_builtby_app.core.errors import ManifestError
from create_builtby_app.core.report import Reporter

MANIFEST = "package.json"

# Generator scripts and lock files that are stale in a generated project.
GENERATOR_FILES: tuple[str, ...] = (
    "scripts/generate-app.ts",
    "scripts/rename-app.ts",
    "pnpm-lock.yaml",
    "yarn.lock",
    "package-lock.json",
)


def remove_package_manager_pin(project_dir: Path) -> bool:
    """Drop the ``packageManager`` field so any package manager can install the project."""
    path = project_dir / MANIFEST
    if not path.exists():
        return False

    try:
        manifest = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"{MANIFEST} is not valid JSON: {exc}") from exc

    if not isinstance(manifest, dict) or "packageManager" not in manifest:
        return False

    del manifest["packageManager"]
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return True


def remove_generator_files(project_dir: Path) -> list[str]:
    """Delete the generator-only files present in ``project_dir``. Returns the removed names."""
    removed: list[str] = []
    for name in GENERATOR_FILES:
        path = project_dir / name
        if path.is_file():
            path.unlink()
            removed.append(name)
    return removed


def render_project(
    project_dir: Path,
    template: Template,
    answers: Answers,
    reporter: Reporter,
) -> None:
    """Clone ``template`` into ``project_dir`` and customize it with ``answers``.

    Nothing is rolled back on failure; a partially customized directory may remain.
    """
    reporter.step("Cloning template...")
    clone_template(template.repo, project_dir, reporter)

    remove_package_manager_pin(project_dir)

    reporter.step("Customizing project...")
    template.transform(project_dir, answers, reporter)

    remove_generator_files(project_dir)
