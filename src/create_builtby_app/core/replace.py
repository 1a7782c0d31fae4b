"""Literal find-and-replace over an explicit set of files."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import os
from pathlib import Path
from typing import NamedTuple

from create_builtby_app.core.report import NullReporter, Reporter


class Replacement(NamedTuple):
    """Replace every occurrence of the literal ``old`` with ``new``."""

    old: str
    new: str


def _display_path(path: Path) -> str:
    try:
        return os.path.relpath(path)
    except ValueError:
        # Different drive on Windows.
        return str(path)


def replace_in_file(
    path: Path,
    rules: Sequence[Replacement],
    reporter: Reporter | None = None,
) -> bool:
    """Apply ``rules`` in order to the contents of ``path``.

    Matching is literal, never a regular expression, and each rule sees the
    output of the rules before it. The file is written at most once and only
    when some rule matched. Line endings and all unmatched text are kept
    byte for byte. A missing file is skipped.

    Returns:
        Whether the file was rewritten.
    """
    if not path.exists():
        return False

    with path.open(encoding="utf-8", newline="") as f:
        content = f.read()
    modified = False

    for old, new in rules:
        if old and old in content:
            content = content.replace(old, new)
            modified = True

    if modified:
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
        (reporter or NullReporter()).success(_display_path(path))

    return modified


def replace_in_files(
    root: Path,
    files: Iterable[str],
    rules: Sequence[Replacement],
    reporter: Reporter | None = None,
) -> list[Path]:
    """Run :func:`replace_in_file` on each relative path in ``files``. Returns the modified paths."""
    modified: list[Path] = []
    for name in files:
        path = root / name
        if replace_in_file(path, rules, reporter):
            modified.append(path)
    return modified
