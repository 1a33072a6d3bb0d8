# haikupress/evaluation/__init__.py

from .syllables import estimate_syllables
from .haiku_validator import HAIKU_PATTERN, split_lines, validate_haiku

__all__ = [
    "estimate_syllables",
    "validate_haiku",
    "split_lines",
    "HAIKU_PATTERN"
]
