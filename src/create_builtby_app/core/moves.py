"""Relocation of files and directories inside a cloned project."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple


class Move(NamedTuple):
    """Relative source and destination of a file or directory move."""

    source: str
    destination: str


def move_path(root: Path, move: Move) -> bool:
    """Move ``root/source`` to ``root/destination``, creating parent directories.

    Directories move wholesale. An existing destination file is replaced. Does
    nothing when the source does not exist.

    Returns:
        Whether anything was moved.
    """
    source = root / move.source
    if not source.exists():
        return False

    destination = root / move.destination
    destination.parent.mkdir(parents=True, exist_ok=True)
    source.replace(destination)
    return True


def apply_moves(root: Path, moves: Iterable[Move]) -> list[Move]:
    """Apply ``moves`` in order. Returns the moves whose source existed."""
    return [move for move in moves if move_path(root, move)]
