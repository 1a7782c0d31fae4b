"""Command line interface for create-builtby-app."""

from create_builtby_app.cli.app import app

__all__ = ["app"]
