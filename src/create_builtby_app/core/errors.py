"""Exceptions raised while generating a project."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for errors that abort project generation."""


class CloneError(ScaffoldError):
    """The template repository could not be cloned."""


class TemplateAccessError(CloneError):
    """The template repository exists but the user cannot read it (private or unknown ref)."""

    def __init__(self, repo: str, detail: str = "") -> None:
        self.repo = repo
        self.detail = detail
        super().__init__(f"Could not access template repository '{repo}'")


class ManifestError(ScaffoldError):
    """The cloned package.json could not be parsed."""


class InvalidAnswerError(ScaffoldError):
    """An answer passed on the command line failed its question's validation."""

    def __init__(self, name: str, value: str, message: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid value {value!r} for {name}: {message}")
