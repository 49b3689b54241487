from .config import DEFAULT_ALPHA, DetectorConfig
from .detector import Detector
from .builder import DetectorBuilder

__all__ = ["DEFAULT_ALPHA", "Detector", "DetectorBuilder", "DetectorConfig"]
