"""Read language profiles from JSON documents on disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

from src.model.errors import ProfileLoadError

from .config import FREQUENCIES_FIELD, NAME_FIELD, PROFILE_SUFFIX, TOTALS_FIELD
from .helpers import ensure_mapping, to_counts, to_frequency_map
from .records import LanguageProfile

logger = logging.getLogger(__name__)


def profile_from_document(document: Any) -> LanguageProfile:
    """Build a LanguageProfile from a decoded ``{"name", "freq", "n_words"}`` document."""
    data = ensure_mapping(document, "<root>")
    name = data[NAME_FIELD]
    if not isinstance(name, str):
        raise TypeError(f"Field '{NAME_FIELD}' must be a string, got {type(name).__name__}")
    return LanguageProfile(
        name=name,
        frequencies=to_frequency_map(data[FREQUENCIES_FIELD], FREQUENCIES_FIELD),
        per_length_totals=to_counts(data[TOTALS_FIELD], TOTALS_FIELD),
    )


def load_profile(path: Path) -> LanguageProfile:
    """Load one profile document, wrapping every read or parse failure in ProfileLoadError."""
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ProfileLoadError(path) from exc
    except json.JSONDecodeError as exc:
        raise ProfileLoadError(path, "Malformed language profile") from exc

    try:
        profile = profile_from_document(document)
    except (KeyError, TypeError, ValueError) as exc:
        raise ProfileLoadError(path, f"Invalid language profile ({exc})") from exc

    logger.debug(f"Loaded profile '{profile.name}' with {len(profile.frequencies)} n-grams from {path}")
    return profile


def load_profiles(root: Path, languages: Optional[Sequence[str]] = None) -> List[LanguageProfile]:
    """Load ``root/<language>.json`` for each requested language, in the requested order.

    When ``languages`` is None every profile document under ``root`` is loaded in
    file-name order.
    """
    if languages is None:
        paths = sorted(root.glob(f"*{PROFILE_SUFFIX}"))
    else:
        paths = [root / f"{language}{PROFILE_SUFFIX}" for language in languages]
    return [load_profile(path) for path in paths]


def profile_to_document(profile: LanguageProfile) -> Mapping[str, Any]:
    """Inverse of ``profile_from_document``; used when writing fixtures and bundles."""
    return {
        NAME_FIELD: profile.name,
        FREQUENCIES_FIELD: dict(profile.frequencies),
        TOTALS_FIELD: list(profile.per_length_totals),
    }


__all__ = ["load_profile", "load_profiles", "profile_from_document", "profile_to_document"]
