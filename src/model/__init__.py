"""Construction of the shared n-gram probability model."""

from .errors import (
    DuplicateLanguageError,
    EmptyModelError,
    ErrorCode,
    IncompleteModelError,
    LanguageModelError,
    ProfileLoadError,
)
from .probability import ProbabilityModel
from .aggregator import ProfileAggregator

__all__ = [
    "DuplicateLanguageError",
    "EmptyModelError",
    "ErrorCode",
    "IncompleteModelError",
    "LanguageModelError",
    "ProbabilityModel",
    "ProfileAggregator",
    "ProfileLoadError",
]
