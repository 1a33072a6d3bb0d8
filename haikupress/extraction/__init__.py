# haikupress/extraction/__init__.py

from .blocks import Block, parse_blocks, strip_all_tags, extract_plain_text

__all__ = [
    "Block",
    "parse_blocks",
    "strip_all_tags",
    "extract_plain_text"
]
