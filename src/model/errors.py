"""Errors raised while building the shared n-gram probability model."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorCode(Enum):
    """Machine-readable categories attached to every model construction error."""

    DUPLICATE_LANGUAGE = "duplicate_language"
    PROFILE_NOT_LOADED = "profile_not_loaded"
    FAILED_TO_INITIALIZE = "failed_to_initialize"


class LanguageModelError(Exception):
    """Base class for fatal model construction failures."""

    code: ErrorCode = ErrorCode.FAILED_TO_INITIALIZE

    def __init__(self, message: str, code: Optional[ErrorCode] = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class DuplicateLanguageError(LanguageModelError):
    """A profile was merged for a language that is already part of the model."""

    code = ErrorCode.DUPLICATE_LANGUAGE

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} language profile is already defined")
        self.name = name


class EmptyModelError(LanguageModelError):
    """A detector was requested before any language profile was merged."""

    code = ErrorCode.PROFILE_NOT_LOADED

    def __init__(self) -> None:
        super().__init__("No language profiles have been merged into the model")


class IncompleteModelError(LanguageModelError):
    """Fewer profiles were merged than the model was sized for."""

    code = ErrorCode.PROFILE_NOT_LOADED

    def __init__(self, merged: int, expected: int) -> None:
        super().__init__(f"Model was sized for {expected} languages but only {merged} were merged")
        self.merged = merged
        self.expected = expected


class ProfileLoadError(LanguageModelError):
    """A profile document could not be read or parsed."""

    code = ErrorCode.FAILED_TO_INITIALIZE

    def __init__(self, path: Union[str, Path], reason: str = "Failed to read language profile") -> None:
        super().__init__(f"{reason}: {path}")
        self.path = Path(path)


__all__ = [
    "DuplicateLanguageError",
    "EmptyModelError",
    "ErrorCode",
    "IncompleteModelError",
    "LanguageModelError",
    "ProfileLoadError",
]
