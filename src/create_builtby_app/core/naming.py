"""Case conversions for free-form app names."""

from __future__ import annotations

import re

__all__ = ["to_kebab_case", "to_snake_case", "to_title_words"]

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")
_REPEATED_HYPHENS = re.compile(r"-{2,}")
_WORD_SEPARATORS = re.compile(r"[-_\s]+")


def to_kebab_case(value: str) -> str:
    """Return ``value`` as lowercase words joined by hyphens.

    ``"My App"`` and ``"myApp"`` both become ``"my-app"``. Anything that is not
    an ASCII letter or digit acts as a word separator, so a value without any
    letters or digits becomes the empty string.
    """
    text = value.strip()
    text = _CAMEL_BOUNDARY.sub(r"\1-\2", text)
    text = _NON_ALNUM.sub("-", text)
    text = _REPEATED_HYPHENS.sub("-", text)
    text = text.removeprefix("-").removesuffix("-")
    return text.lower()


def to_snake_case(value: str) -> str:
    """Return ``value`` as lowercase words joined by underscores."""
    return to_kebab_case(value).replace("-", "_")


def to_title_words(value: str) -> str:
    """Capitalise each hyphen, underscore or space separated word: ``my-app`` -> ``My App``."""
    words = _WORD_SEPARATORS.split(value)
    return " ".join(word[:1].upper() + word[1:] for word in words)
