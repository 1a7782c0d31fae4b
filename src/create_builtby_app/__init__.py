"""create-builtby-app: scaffold projects from the builtby.win templates."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("create-builtby-app")
except PackageNotFoundError:
    __version__ = "0.0.0"
