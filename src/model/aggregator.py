"""Merge per-language n-gram profiles into a shared probability model."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from src.profiles.config import MAX_NGRAM_LENGTH
from src.profiles.records import LanguageProfile

from .errors import DuplicateLanguageError
from .probability import ProbabilityModel

logger = logging.getLogger(__name__)


class ProfileAggregator:
    """Owns one ProbabilityModel and fills it one language profile at a time.

    The total number of languages is fixed when the aggregator is created, so every
    vector allocated during the session has the same length.
    """

    def __init__(self, total_language_count: int) -> None:
        if total_language_count < 0:
            raise ValueError(f"total_language_count must be non-negative, got {total_language_count}")
        self._total_language_count = total_language_count
        self._model = ProbabilityModel(total_language_count)

    @property
    def model(self) -> ProbabilityModel:
        return self._model

    @property
    def total_language_count(self) -> int:
        return self._total_language_count

    @property
    def merged_count(self) -> int:
        """Number of profiles merged so far."""
        return len(self._model.language_list())

    def merge(
        self,
        profile: LanguageProfile,
        index: Optional[int] = None,
        total_language_count: Optional[int] = None,
    ) -> int:
        """Merge ``profile`` at detection ``index`` and return that index.

        ``index`` defaults to the next free slot. Entries whose n-gram length falls
        outside ``[1, MAX_NGRAM_LENGTH]`` are dropped with a warning. Every check runs
        before the model is touched, so a failed merge leaves it unchanged.

        Raises:
            DuplicateLanguageError: ``profile.name`` was merged before.
            ValueError: ``index`` is out of range or not the next free slot, or
                ``total_language_count`` differs from the session total.
        """
        if self._model.frozen:
            raise RuntimeError("Cannot merge into a frozen model.")
        if self._model.index_of(profile.name) is not None:
            raise DuplicateLanguageError(profile.name)

        next_index = self.merged_count
        if index is None:
            index = next_index
        if not 0 <= index < self._total_language_count:
            raise ValueError(
                f"Index {index} is out of range for a model of {self._total_language_count} languages"
            )
        if index != next_index:
            raise ValueError(f"Profiles must be merged in order: expected index {next_index}, got {index}")
        if total_language_count is not None and total_language_count != self._total_language_count:
            raise ValueError(
                f"total_language_count {total_language_count} does not match the session total "
                f"{self._total_language_count}"
            )

        accepted = _conditional_probabilities(profile)
        self._model.register_language(profile.name)
        for ngram, probability in accepted:
            self._model.vector_for(ngram)[index] = probability

        skipped = len(profile.frequencies) - len(accepted)
        logger.debug(
            f"Merged profile '{profile.name}' at index {index}: {len(accepted)} n-grams kept, {skipped} skipped"
        )
        return index

    def merge_all(self, profiles: Iterable[LanguageProfile]) -> ProbabilityModel:
        """Merge ``profiles`` in order at consecutive indices and return the model."""
        for profile in profiles:
            self.merge(profile)
        return self._model


def _conditional_probabilities(profile: LanguageProfile) -> List[Tuple[str, float]]:
    """Return ``(ngram, count / total_for(len(ngram)))`` for every usable entry of ``profile``."""
    accepted: List[Tuple[str, float]] = []
    for ngram, count in profile.frequencies.items():
        length = len(ngram)
        if length < 1 or length > MAX_NGRAM_LENGTH:
            logger.warning(f"Invalid n-gram in language profile '{profile.name}': {ngram!r}")
            continue
        total = profile.per_length_totals[length - 1]
        if total == 0:
            logger.warning(
                f"Skipping n-gram {ngram!r} in language profile '{profile.name}': "
                f"no {length}-grams counted"
            )
            continue
        accepted.append((ngram, count / total))
    return accepted


__all__ = ["ProfileAggregator"]
