"""Gate model usability and hand out detectors."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from src.model.aggregator import ProfileAggregator
from src.model.errors import EmptyModelError, IncompleteModelError
from src.model.probability import ProbabilityModel
from src.profiles.config import BUNDLED_LANGUAGES
from src.profiles.loader import load_profiles
from src.profiles.records import LanguageProfile

from .config import DetectorConfig
from .detector import Detector

logger = logging.getLogger(__name__)


class DetectorBuilder:
    """Validates a finished ProbabilityModel and creates detectors sharing it."""

    def __init__(self, model: ProbabilityModel, config: Optional[DetectorConfig] = None) -> None:
        self.model = model
        self.config = config or DetectorConfig()

    @classmethod
    def from_profiles(
        cls,
        profiles: Sequence[LanguageProfile],
        config: Optional[DetectorConfig] = None,
    ) -> "DetectorBuilder":
        """Run one build session over ``profiles``; their order fixes the detection indices."""
        profile_list = list(profiles)
        aggregator = ProfileAggregator(len(profile_list))
        model = aggregator.merge_all(profile_list)
        logger.info(f"Built probability model for {len(profile_list)} languages ({len(model)} n-grams)")
        return cls(model, config=config)

    @classmethod
    def from_directory(
        cls,
        root: Path,
        languages: Optional[Sequence[str]] = BUNDLED_LANGUAGES,
        config: Optional[DetectorConfig] = None,
    ) -> "DetectorBuilder":
        """Load ``root/<language>.json`` for each language and build from them.

        Pass ``languages=None`` to load every profile document found under ``root``.
        """
        return cls.from_profiles(load_profiles(root, languages), config=config)

    def create(self, alpha: Optional[float] = None) -> Detector:
        """Return a detector over the finished model.

        ``alpha`` overrides the configured smoothing parameter. Values outside
        (0, 1] are forwarded as given.

        Raises:
            EmptyModelError: no language profile was merged.
            IncompleteModelError: fewer profiles were merged than the model was sized for.
        """
        languages = self.model.language_list()
        if not languages:
            raise EmptyModelError()
        if len(languages) != self.model.language_count:
            raise IncompleteModelError(len(languages), self.model.language_count)

        self.model.freeze()
        smoothing = self.config.alpha if alpha is None else alpha
        if not 0.0 < smoothing <= 1.0:
            logger.warning(f"Smoothing parameter {smoothing} lies outside (0, 1]; forwarding it unchanged")
        return Detector(self.model, alpha=smoothing)


__all__ = ["DetectorBuilder"]
