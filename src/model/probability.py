"""Shared n-gram probability matrix with one dense slot per language."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from src.profiles.config import MAX_NGRAM_LENGTH

logger = logging.getLogger(__name__)


class ProbabilityModel:
    """Sparse-keyed, dense-valued matrix of per-language n-gram probabilities.

    Every vector has exactly ``language_count`` float64 slots, fixed when the model
    is created; slot ``i`` belongs to the language registered at detection index
    ``i``. The model stores raw conditional probabilities only. Once frozen it is
    read-only and may be shared between detectors without locking.
    """

    def __init__(self, language_count: int) -> None:
        if language_count < 0:
            raise ValueError(f"language_count must be non-negative, got {language_count}")
        self._language_count = language_count
        self._languages: List[str] = []
        self._index: Dict[str, int] = {}
        self._matrix: Dict[str, np.ndarray] = {}
        self._frozen = False

    # ------------------------------------------------------------------
    # Read access

    @property
    def language_count(self) -> int:
        """Number of languages the vectors were sized for."""
        return self._language_count

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, ngram: str) -> Optional[np.ndarray]:
        """Return a read-only view of the probability vector for ``ngram``, or None if never observed."""
        vector = self._matrix.get(ngram)
        if vector is None:
            return None
        view = vector.view()
        view.flags.writeable = False
        return view

    def index_of(self, name: str) -> Optional[int]:
        """Return the detection index of language ``name``, or None if it was never merged."""
        return self._index.get(name)

    def language_list(self) -> Tuple[str, ...]:
        """Languages in detection-index order."""
        return tuple(self._languages)

    def ngrams(self) -> Iterator[str]:
        return iter(self._matrix)

    def __len__(self) -> int:
        return len(self._matrix)

    def __contains__(self, ngram: object) -> bool:
        return ngram in self._matrix

    def __repr__(self) -> str:
        return (
            f"ProbabilityModel(languages={len(self._languages)}/{self._language_count}, "
            f"ngrams={len(self._matrix)}, frozen={self._frozen})"
        )

    # ------------------------------------------------------------------
    # Mutation, only valid before freeze()

    def register_language(self, name: str) -> int:
        """Append ``name`` to the registry and return its detection index."""
        self._ensure_mutable()
        if name in self._index:
            raise ValueError(f"Language '{name}' is already registered")
        if len(self._languages) >= self._language_count:
            raise ValueError(f"Model is already full ({self._language_count} languages)")
        index = len(self._languages)
        self._languages.append(name)
        self._index[name] = index
        return index

    def vector_for(self, ngram: str) -> np.ndarray:
        """Return the writable vector for ``ngram``, allocating a zero vector on first use."""
        self._ensure_mutable()
        if not 1 <= len(ngram) <= MAX_NGRAM_LENGTH:
            raise ValueError(f"N-gram length must fall within [1, {MAX_NGRAM_LENGTH}], got {ngram!r}")
        vector = self._matrix.get(ngram)
        if vector is None:
            vector = np.zeros(self._language_count, dtype=np.float64)
            self._matrix[ngram] = vector
        return vector

    def freeze(self) -> None:
        """Mark every vector read-only and reject further mutation."""
        if self._frozen:
            return
        for vector in self._matrix.values():
            vector.flags.writeable = False
        self._frozen = True
        logger.info(
            f"Froze probability model with {len(self._languages)} languages and {len(self._matrix)} n-grams"
        )

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("ProbabilityModel is frozen; build a new model to add languages.")


__all__ = ["ProbabilityModel"]
