from __future__ import annotations


class TimetablerError(Exception):
    pass


class ConstraintsError(TimetablerError, ValueError):
    """Raised when a constraints document has a malformed record."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class ConfigError(TimetablerError):
    pass
