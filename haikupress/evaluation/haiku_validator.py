# haikupress/evaluation/haiku_validator.py

import re
from typing import List, Tuple

from haikupress.evaluation.syllables import estimate_syllables
from haikupress.models.verdict import (
    Invalid,
    LineCountMismatch,
    SyllableMismatch,
    Valid,
    ValidationVerdict,
)

HAIKU_PATTERN: Tuple[int, ...] = (5, 7, 5)

LINE_BREAK = re.compile(r'\r\n|\r|\n')
# Whitespace plus NUL, which PHP's trim() also removes
TRIM = re.compile(r'^[\s\x00]+|[\s\x00]+$')


def trim_line(line: str) -> str:
    return TRIM.sub('', line)


def split_lines(text: str) -> List[str]:
    """
    Split text on CRLF, CR or LF and drop blank lines.

    Args:
        text: Plain text block

    Returns:
        Trimmed, non-empty lines in their original order
    """
    lines = (trim_line(line) for line in LINE_BREAK.split(text))
    return [line for line in lines if line]


def validate_haiku(text: str) -> ValidationVerdict:
    """
    Validate that text is a three-line 5-7-5 haiku.

    The line count is checked first. Lines are then checked in order and
    validation stops at the first line whose estimated syllable count does
    not match the pattern.

    Args:
        text: Plain text block, already stripped of any markup

    Returns:
        Valid, or Invalid carrying the first failing reason
    """
    lines = split_lines(text)

    if len(lines) != len(HAIKU_PATTERN):
        return Invalid(LineCountMismatch(line_count=len(lines)))

    for index, (line, expected) in enumerate(zip(lines, HAIKU_PATTERN)):
        actual = estimate_syllables(line)
        if actual != expected:
            return Invalid(SyllableMismatch(
                line_index=index,
                expected=expected,
                actual=actual,
                line_text=line
            ))

    return Valid()
