"""Configuration for detectors built from a finished probability model."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Smoothing prior applied to unseen n-grams; documented domain is (0, 1].
DEFAULT_ALPHA = 0.5

ALPHA_ENV_VAR = "LANGDETECT_ALPHA"


@dataclass(frozen=True)
class DetectorConfig:
    """Settings forwarded to every detector a builder creates."""

    alpha: float = DEFAULT_ALPHA

    @classmethod
    def from_env(cls) -> "DetectorConfig":
        """Create configuration from environment variables."""
        raw = os.getenv(ALPHA_ENV_VAR)
        if raw is None or not raw.strip():
            return cls()
        try:
            alpha = float(raw)
        except ValueError as exc:
            raise ValueError(f"{ALPHA_ENV_VAR} must be a number, got {raw!r}") from exc
        return cls(alpha=alpha)


__all__ = ["ALPHA_ENV_VAR", "DEFAULT_ALPHA", "DetectorConfig"]
