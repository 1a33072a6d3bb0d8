# haikupress/models/verdict.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any, Union


class FailureCode(Enum):
    """Machine-checkable reasons a text is not a haiku"""
    LINE_COUNT = "haikupress_line_count"
    SYLLABLE_COUNT = "haikupress_syllable_count"


LINE_COUNT_MESSAGE = "Content must contain exactly three lines to be a haiku."


@dataclass(frozen=True)
class LineCountMismatch:
    """The text did not reduce to exactly three non-empty lines"""

    line_count: int

    @property
    def code(self) -> FailureCode:
        return FailureCode.LINE_COUNT

    @property
    def message(self) -> str:
        return LINE_COUNT_MESSAGE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "code": self.code.value,
            "message": self.message,
            "line_count": self.line_count
        }


@dataclass(frozen=True)
class SyllableMismatch:
    """
    A line whose estimated syllable count differs from the pattern.

    ``line_text`` is the raw trimmed line. It is not escaped; whoever
    displays the message is responsible for that.
    """

    line_index: int
    expected: int
    actual: int
    line_text: str

    @property
    def code(self) -> FailureCode:
        return FailureCode.SYLLABLE_COUNT

    @property
    def line_number(self) -> int:
        return self.line_index + 1

    @property
    def message(self) -> str:
        return f'Line {self.line_number} must contain {self.expected} syllables: "{self.line_text}".'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "code": self.code.value,
            "message": self.message,
            "line_index": self.line_index,
            "expected": self.expected,
            "actual": self.actual,
            "line_text": self.line_text
        }


FailureReason = Union[LineCountMismatch, SyllableMismatch]


@dataclass(frozen=True)
class Valid:
    """The text is a 5-7-5 haiku"""

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def message(self) -> Optional[str]:
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"is_valid": True}


@dataclass(frozen=True)
class Invalid:
    """The text failed validation for exactly one reason"""

    reason: FailureReason

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def code(self) -> FailureCode:
        return self.reason.code

    @property
    def message(self) -> str:
        return self.reason.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": False,
            "reason": self.reason.to_dict()
        }


ValidationVerdict = Union[Valid, Invalid]
