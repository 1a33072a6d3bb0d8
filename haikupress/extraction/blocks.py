# haikupress/extraction/blocks.py

import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup

# <!-- wp:namespace/name {"json": "attrs"} --> ... <!-- /wp:namespace/name -->
# and the self-closing form <!-- wp:name /-->
BLOCK_DELIMITER = re.compile(
    r'<!--\s+(?P<closer>/)?wp:(?P<namespace>[a-z][a-z0-9_-]*/)?(?P<name>[a-z][a-z0-9_-]*)\s+'
    r'(?P<attrs>\{(?:(?!\}\s+/?-->).)*\}\s+)?(?P<void>/)?-->',
    re.DOTALL
)

DEFAULT_NAMESPACE = "core/"


@dataclass
class Block:
    """A parsed content block; ``name`` is None for freeform HTML"""

    name: Optional[str]
    attrs: Dict[str, Any] = field(default_factory=dict)
    inner_blocks: List["Block"] = field(default_factory=list)
    inner_html: str = ""
    # None marks where an inner block sits between HTML chunks
    inner_content: List[Optional[str]] = field(default_factory=list)

    @property
    def is_freeform(self) -> bool:
        return self.name is None

    def add_html(self, html: str):
        if html:
            self.inner_html += html
            self.inner_content.append(html)

    def add_inner_block(self, block: "Block"):
        self.inner_blocks.append(block)
        self.inner_content.append(None)


def _parse_attrs(raw: Optional[str]) -> Dict[str, Any]:
    if not raw:
        return {}
    try:
        attrs = json.loads(raw.strip())
    except json.JSONDecodeError:
        return {}
    return attrs if isinstance(attrs, dict) else {}


def parse_blocks(document: str) -> List[Block]:
    """
    Parse block markup into a tree of blocks.

    HTML outside any block becomes a freeform block. Parsing never fails:
    blocks left open at the end of the document are closed implicitly and
    closers with nothing to close are kept as literal HTML.

    Args:
        document: Serialized post content

    Returns:
        Top-level blocks in document order
    """
    blocks: List[Block] = []
    stack: List[Block] = []
    offset = 0

    def add_html(html: str):
        if not html:
            return
        if stack:
            stack[-1].add_html(html)
        else:
            blocks.append(Block(name=None, inner_html=html, inner_content=[html]))

    def emit(block: Block):
        if stack:
            stack[-1].add_inner_block(block)
        else:
            blocks.append(block)

    for match in BLOCK_DELIMITER.finditer(document):
        add_html(document[offset:match.start()])
        offset = match.end()

        if match.group('closer'):
            if not stack:
                add_html(match.group(0))
                continue
            emit(stack.pop())
            continue

        block = Block(
            name=(match.group('namespace') or DEFAULT_NAMESPACE) + match.group('name'),
            attrs=_parse_attrs(match.group('attrs'))
        )
        if match.group('void'):
            emit(block)
        else:
            stack.append(block)

    add_html(document[offset:])
    while stack:
        emit(stack.pop())

    return blocks


def strip_all_tags(html: str) -> str:
    """Reduce an HTML fragment to trimmed text, keeping paragraph and <br> breaks."""
    soup = BeautifulSoup(html, 'html.parser')

    for element in soup(['script', 'style']):
        element.decompose()
    for br in soup.find_all('br'):
        br.replace_with('\n')
    # Innermost first so nested paragraphs are still attached when replaced
    for p in reversed(soup.find_all('p')):
        p.replace_with('\n' + p.get_text() + '\n')

    return soup.get_text().strip()


def extract_text_from_block(block: Block) -> str:
    """Extract text from a block, recursing into inner blocks when it has any."""
    if block.inner_blocks:
        return ''.join(extract_text_from_block(inner) for inner in block.inner_blocks)
    return strip_all_tags(block.inner_html) + "\n"


def extract_plain_text(content: str) -> str:
    """
    Flatten block markup (or classic HTML) into newline-joined plain text.

    Args:
        content: Post content with or without block delimiters

    Returns:
        Plain text with one line per leaf block
    """
    plain_text = ''.join(extract_text_from_block(block) for block in parse_blocks(content))
    return plain_text.strip()
