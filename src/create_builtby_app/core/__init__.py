"""Template customization engine: case conversion, literal replacement and moves."""

from create_builtby_app.core.errors import (
    CloneError,
    InvalidAnswerError,
    ManifestError,
    ScaffoldError,
    TemplateAccessError,
)
from create_builtby_app.core.moves import Move, apply_moves, move_path
from create_builtby_app.core.naming import to_kebab_case, to_snake_case, to_title_words
from create_builtby_app.core.replace import Replacement, replace_in_file, replace_in_files
from create_builtby_app.core.report import NullReporter, Reporter

__all__ = [
    "CloneError",
    "InvalidAnswerError",
    "ManifestError",
    "Move",
    "NullReporter",
    "Replacement",
    "Reporter",
    "ScaffoldError",
    "TemplateAccessError",
    "apply_moves",
    "move_path",
    "replace_in_file",
    "replace_in_files",
    "to_kebab_case",
    "to_snake_case",
    "to_title_words",
]
