# haikupress/models/__init__.py

from .verdict import (
    FailureCode,
    FailureReason,
    LineCountMismatch,
    SyllableMismatch,
    Valid,
    Invalid,
    ValidationVerdict,
)

__all__ = [
    'FailureCode',
    'FailureReason',
    'LineCountMismatch',
    'SyllableMismatch',
    'Valid',
    'Invalid',
    'ValidationVerdict'
]
