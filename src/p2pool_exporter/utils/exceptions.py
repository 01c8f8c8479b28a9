from __future__ import annotations

from pathlib import Path


class ExporterError(Exception):
    """Base class for errors raised while serving P2Pool state."""


class StateReadError(ExporterError):
    """Raised when a P2Pool state file is missing or cannot be read."""

    def __init__(self, message: str, *, path: Path | None = None):
        super().__init__(message)
        self.path = path


class StateDecodeError(ExporterError):
    """Raised when a P2Pool state file is not valid JSON or lacks a required field."""

    def __init__(self, message: str, *, path: Path | None = None):
        super().__init__(message)
        self.path = path


class ConfigurationError(ExporterError):
    pass


class ObservationInvariantError(RuntimeError):
    """An observation reached the renderer in a shape it cannot serialise.

    Only reachable through a bug in metric extraction, so it is never handled
    by the HTTP layer.
    """
