"""Detector handle handed to the classification layer."""

from __future__ import annotations

from typing import Tuple

from src.model.probability import ProbabilityModel

from .config import DEFAULT_ALPHA


class Detector:
    """Carries a frozen probability model and the smoothing parameter used to score against it."""

    def __init__(self, model: ProbabilityModel, alpha: float = DEFAULT_ALPHA) -> None:
        if not model.frozen:
            raise ValueError("Detectors require a frozen model; build them through DetectorBuilder.create().")
        self._model = model
        self.alpha = alpha

    @property
    def model(self) -> ProbabilityModel:
        return self._model

    @property
    def languages(self) -> Tuple[str, ...]:
        return self._model.language_list()

    def __repr__(self) -> str:
        return f"Detector(languages={len(self.languages)}, alpha={self.alpha})"


__all__ = ["Detector"]
