"""Dependency installation and the closing next-steps block."""

from __future__ import annotations

from pathlib import Path
import subprocess

from create_builtby_app.cli._types import Answers, PackageManager, Template
from create_builtby_app.core.report import Reporter


def install_dependencies(
    project_dir: Path, package_manager: PackageManager, reporter: Reporter
) -> bool:
    """Run ``<package manager> install`` in ``project_dir``. Failure only produces a warning."""
    reporter.step("Installing dependencies...")
    try:
        subprocess.run([package_manager.value, "install"], cwd=project_dir, check=True)
    except (subprocess.CalledProcessError, FileNotFoundError):
        reporter.warning(
            f"Could not install dependencies. Run {package_manager.value} install manually."
        )
        return False
    return True


def next_steps(
    project_name: str,
    template: Template,
    answers: Answers,
    package_manager: PackageManager,
) -> list[tuple[str, str]]:
    """Commands to run after generation, as ``(command, explanation)`` pairs."""
    run = package_manager.run_command
    steps: list[tuple[str, str]] = [(f"cd {project_name}", "")]

    if template is Template.DESKTOP:
        steps += [
            (f"{run} setup:polar", "Configure Polar.sh license"),
            (f"{run} tauri dev", "Start development"),
        ]
    elif answers.get("needsApiRoutes"):
        steps += [
            (f"{run} setup", "Set up Cloudflare D1, auth, and more"),
            (f"{run} dev", "Start development"),
        ]
    else:
        steps += [
            (f"{run} dev", "Start development"),
            (f"{run} setup", "Run later to enable API routes"),
        ]

    return steps
