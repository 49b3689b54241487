"""Static configuration for language profile documents and their default locations."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

# N-grams of length 1..MAX_NGRAM_LENGTH are the only discriminative features kept.
MAX_NGRAM_LENGTH = 3

# Default directory used by the Typer CLI; callers may override it.
DEFAULT_PROFILE_ROOT = Path("data/profiles")

PROFILE_SUFFIX = ".json"

# ---------------------------------------------------------------------------
# Field names of a serialized profile document.

NAME_FIELD = "name"
FREQUENCIES_FIELD = "freq"
TOTALS_FIELD = "n_words"

# ---------------------------------------------------------------------------
# Languages shipped with the short-message profile bundle, in detection order.

BUNDLED_LANGUAGES: Tuple[str, ...] = (
    "ar",
    "bg",
    "bn",
    "ca",
    "cs",
    "da",
    "de",
    "el",
    "en",
    "es",
    "et",
    "fa",
    "fi",
    "fr",
    "gu",
    "he",
    "hi",
    "hr",
    "hu",
    "id",
    "it",
    "ja",
    "ko",
    "lt",
    "lv",
    "mk",
    "ml",
    "nl",
    "no",
    "pa",
    "pl",
    "pt",
    "ro",
    "ru",
    "si",
    "sq",
    "sv",
    "ta",
    "te",
    "th",
    "tl",
    "tr",
    "uk",
    "ur",
    "vi",
    "zh-cn",
    "zh-tw",
)


__all__ = [
    "BUNDLED_LANGUAGES",
    "DEFAULT_PROFILE_ROOT",
    "FREQUENCIES_FIELD",
    "MAX_NGRAM_LENGTH",
    "NAME_FIELD",
    "PROFILE_SUFFIX",
    "TOTALS_FIELD",
]
