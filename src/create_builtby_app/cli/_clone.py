"""Clones a template repository into the new project directory."""

from __future__ import annotations

import os
from pathlib import Path
import shutil
import subprocess

from create_builtby_app.core.errors import CloneError, TemplateAccessError
from create_builtby_app.core.report import NullReporter, Reporter

GIT_HOST_ENV = "CREATE_BUILTBY_APP_GIT_HOST"
DEFAULT_GIT_HOST = "https://github.com"

# git stderr fragments meaning "you cannot see this repository or ref".
_ACCESS_MARKERS: tuple[str, ...] = (
    "repository not found",
    "could not read username",
    "authentication failed",
    "could not find commit",
    "permission denied",
    "remote branch",
)


def repo_url(repo: str) -> tuple[str, str | None]:
    """Split ``owner/name[#ref]`` into a clone URL and an optional ref."""
    name, _, ref = repo.partition("#")
    host = os.environ.get(GIT_HOST_ENV, DEFAULT_GIT_HOST).rstrip("/")
    return f"{host}/{name}.git", ref or None


def _is_access_error(stderr: str) -> bool:
    text = stderr.lower()
    return any(marker in text for marker in _ACCESS_MARKERS)


def clone_template(repo: str, dest: Path, reporter: Reporter | None = None) -> None:
    """Materialize the latest snapshot of ``repo`` at ``dest`` without git history.

    Raises:
        TemplateAccessError: The repository or ref is private or does not exist.
        CloneError: Any other clone failure, including a missing ``git``.
    """
    reporter = reporter or NullReporter()
    url, ref = repo_url(repo)

    cmd = ["git", "clone", "--depth", "1", "--quiet"]
    if ref is not None:
        cmd += ["--branch", ref]
    cmd += [url, str(dest)]

    reporter.info(f"cloning {repo} from {url}")
    env = {**os.environ, "GIT_TERMINAL_PROMPT": "0"}
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, env=env)
    except FileNotFoundError:
        raise CloneError("git is not installed or not on PATH") from None

    if result.returncode != 0:
        stderr = result.stderr.strip()
        if _is_access_error(stderr):
            raise TemplateAccessError(repo, stderr)
        raise CloneError(stderr or f"git clone exited with status {result.returncode}")

    shutil.rmtree(dest / ".git", ignore_errors=True)
    reporter.info(f"cloned {repo} to {dest.name}")
