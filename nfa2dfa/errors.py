from __future__ import annotations

from typing import Optional


class AutomatonError(Exception):
    pass


class NFAFormatError(AutomatonError, ValueError):
    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class ReferentialIntegrityError(AutomatonError):
    pass


class ConfigError(AutomatonError):
    pass
