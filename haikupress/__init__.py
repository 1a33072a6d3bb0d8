# haikupress/__init__.py

"""Enforce a 5-7-5 haiku structure on published content."""

from .evaluation import HAIKU_PATTERN, estimate_syllables, split_lines, validate_haiku
from .models import Invalid, Valid, ValidationVerdict

__version__ = "1.0.0"

__all__ = [
    "estimate_syllables",
    "validate_haiku",
    "split_lines",
    "HAIKU_PATTERN",
    "Valid",
    "Invalid",
    "ValidationVerdict"
]
