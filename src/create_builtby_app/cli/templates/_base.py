"""Questions and validators shared by the templates."""

from __future__ import annotations

import re

from create_builtby_app.cli._types import Question

_APP_NAME = re.compile(r"^[a-zA-Z0-9_\s-]+$")
_BUNDLE_IDENTIFIER = re.compile(r"^[a-z][a-z0-9]*(\.[a-z][a-z0-9]*)+$")
_DOMAIN = re.compile(r"^[a-z0-9.-]+\.[a-z]{2,}$")


def is_app_name(value: str) -> bool:
    return _APP_NAME.fullmatch(value) is not None


def is_bundle_identifier(value: str) -> bool:
    return _BUNDLE_IDENTIFIER.fullmatch(value) is not None


def is_domain(value: str) -> bool:
    return _DOMAIN.fullmatch(value) is not None


def app_name_question(example: str) -> Question:
    return Question(
        name="appName",
        message=f'App name (e.g., "{example}")',
        validate=is_app_name,
        error="Only letters, numbers, hyphens, underscores, and spaces",
    )
