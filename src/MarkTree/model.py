from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List


@dataclass
class Block:
    """Base class for block-level nodes."""


@dataclass
class Document:
    blocks: List[Block] = field(default_factory=list)


@dataclass
class Heading(Block):
    level: int
    inline: List["InlineElement"]


@dataclass
class Paragraph(Block):
    inline: List["InlineElement"]


@dataclass
class BlockQuote(Block):
    inline: List["InlineElement"]


class ListKind(Enum):
    ORDERED = "ordered"
    UNORDERED = "unordered"


@dataclass
class ListItem:
    inline: List["InlineElement"]


@dataclass
class ListBlock(Block):
    items: List[ListItem]
    ordered: bool

    @property
    def kind(self) -> ListKind:
        return ListKind.ORDERED if self.ordered else ListKind.UNORDERED


@dataclass
class CodeBlock(Block):
    code: str
    fence_width: int = 3


@dataclass
class HorizontalRule(Block):
    """Horizontal rule / thematic break."""


@dataclass
class InlineElement:
    """Base class for inline nodes."""


@dataclass
class InlineText(InlineElement):
    text: str


@dataclass
class InlineBold(InlineElement):
    children: List[InlineElement] = field(default_factory=list)


@dataclass
class InlineItalic(InlineElement):
    children: List[InlineElement] = field(default_factory=list)


def inline_to_text(elements: Iterable[InlineElement]) -> str:
    """Flatten a span tree to its plain text, dropping formatting markers."""
    texts: list[str] = []
    for element in elements:
        if isinstance(element, InlineText):
            texts.append(element.text)
        elif isinstance(element, (InlineBold, InlineItalic)):
            texts.append(inline_to_text(element.children))
    return "".join(texts)
