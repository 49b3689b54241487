"""Per-language n-gram frequency records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from .config import MAX_NGRAM_LENGTH


@dataclass(frozen=True)
class LanguageProfile:
    """N-gram occurrence counts for one language plus the total count per n-gram length.

    ``per_length_totals[k]`` holds the number of n-grams of length ``k + 1`` observed
    while the profile was built. Key lengths are not checked here; out-of-range keys
    are dropped when the profile is merged into a model.
    """

    name: str
    frequencies: Mapping[str, int]
    per_length_totals: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Language profile name cannot be empty.")
        totals = tuple(self.per_length_totals)
        if len(totals) != MAX_NGRAM_LENGTH:
            raise ValueError(
                f"Profile '{self.name}' must provide {MAX_NGRAM_LENGTH} per-length totals, got {len(totals)}"
            )
        for total in totals:
            if isinstance(total, bool) or not isinstance(total, int) or total < 0:
                raise ValueError(f"Profile '{self.name}' has an invalid per-length total: {total!r}")
        for ngram, count in self.frequencies.items():
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ValueError(f"Profile '{self.name}' has an invalid count for {ngram!r}: {count!r}")
        object.__setattr__(self, "per_length_totals", totals)

    def total_for(self, length: int) -> int:
        """Return the total number of n-grams of ``length`` (1-based)."""
        if not 1 <= length <= MAX_NGRAM_LENGTH:
            raise ValueError(f"N-gram length must fall within [1, {MAX_NGRAM_LENGTH}], got {length}")
        return self.per_length_totals[length - 1]


__all__ = ["LanguageProfile"]
