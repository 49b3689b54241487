from .config import BUNDLED_LANGUAGES, DEFAULT_PROFILE_ROOT, MAX_NGRAM_LENGTH
from .records import LanguageProfile
from .loader import load_profile, load_profiles, profile_from_document, profile_to_document

__all__ = [
    "BUNDLED_LANGUAGES",
    "DEFAULT_PROFILE_ROOT",
    "MAX_NGRAM_LENGTH",
    "LanguageProfile",
    "load_profile",
    "load_profiles",
    "profile_from_document",
    "profile_to_document",
]
