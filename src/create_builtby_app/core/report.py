"""Progress reporting used by the customization engine."""

from __future__ import annotations

from typing import Protocol


class Reporter(Protocol):
    """Receives progress messages from the engine. Implementations decide how to render them."""

    def step(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...


class NullReporter:
    """Reporter that discards every message."""

    def step(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass
