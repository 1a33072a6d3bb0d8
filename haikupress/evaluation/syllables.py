# haikupress/evaluation/syllables.py

"""
Rule-based English syllable estimation.

The estimate is deliberately approximate: no dictionary, no phonetics.
It reduces a line to its ASCII letters, collapses common vowel pairs,
counts vowel groups and corrects for a trailing silent 'e'.
"""

import re
from typing import Tuple

# Order matters: each pair is replaced across the whole string before the
# next one is tried, and earlier output is never rescanned.
DIPHTHONGS: Tuple[str, ...] = (
    'aa', 'ae', 'ai', 'ao', 'au',
    'ea', 'ee', 'ei', 'eo', 'eu',
    'ia', 'ie', 'ii', 'io', 'iu',
    'oa', 'oe', 'oi', 'oo', 'ou',
    'ua', 'ue', 'ui', 'uo', 'uu',
)
DIPHTHONG_REPLACEMENT = 'a'

NON_LETTERS = re.compile(r'[^A-Za-z]')
VOWEL_RUN = re.compile(r'[aeiouy]+')
SILENT_E = re.compile(r'[aeiouy]+e\b')


def normalize_line(line: str) -> str:
    """Lowercase and keep only the letters a-z (no separators survive)."""
    # Strip before lowercasing so non-ASCII letters can't fold into a-z
    return NON_LETTERS.sub('', line).lower()


def collapse_diphthongs(normalized: str) -> str:
    for pair in DIPHTHONGS:
        normalized = normalized.replace(pair, DIPHTHONG_REPLACEMENT)
    return normalized


def estimate_syllables(line: str) -> int:
    """
    Estimate the number of syllables in a line of text.

    Args:
        line: Any string; punctuation, digits and whitespace are ignored

    Returns:
        Estimated syllable count, never less than 1
    """
    collapsed = collapse_diphthongs(normalize_line(line))

    syllables = len(VOWEL_RUN.findall(collapsed))

    # Word boundaries are gone after normalization, so this only
    # ever matches at the very end of the line.
    syllables -= len(SILENT_E.findall(collapsed))

    return max(1, syllables)
