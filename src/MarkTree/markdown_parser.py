from __future__ import annotations

import logging
from typing import List

from .inline_parser import parse_inline
from .model import (
    Block,
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    ListBlock,
    ListItem,
    Paragraph,
)
from .options import (
    DIGITS,
    FENCE_MARKER,
    HEADING_MARKER,
    MAX_FENCE_WIDTH,
    ORDINAL_PUNCTUATION,
    QUOTE_MARKER,
    UNORDERED_MARKER,
    ParserOptions,
)
from .scanner import NEWLINE, CharStream

logger = logging.getLogger(__name__)


def parse_markdown(text: str, options: ParserOptions | None = None) -> Document:
    """Parse the whole source text into a Document; never raises on str input."""
    options = options or ParserOptions()
    text = text.replace("\r\n", NEWLINE).replace("\r", NEWLINE)
    stream = CharStream(text)
    blocks = _parse_blocks(stream, options)
    logger.debug("Parsed %d blocks from %d chars", len(blocks), len(text))
    return Document(blocks=blocks)


parse = parse_markdown


def _parse_blocks(stream: CharStream, options: ParserOptions) -> List[Block]:
    blocks: List[Block] = []
    while not stream.is_end():
        ch = stream.peek()
        if ch == NEWLINE:
            stream.advance()
            continue
        if ch == HEADING_MARKER:
            blocks.append(_parse_heading(stream, options))
        elif ch in DIGITS:
            blocks.append(_parse_list(stream, options, ordered=True))
        elif ch == UNORDERED_MARKER:
            blocks.append(_parse_dash_block(stream, options))
        elif ch == FENCE_MARKER:
            stream.advance()
            blocks.append(_parse_code(stream))
        elif ch == QUOTE_MARKER:
            blocks.append(_parse_blockquote(stream, options))
        else:
            blocks.append(_parse_paragraph(stream, options))
    return blocks


def _parse_heading(stream: CharStream, options: ParserOptions) -> Heading:
    level = 0
    while stream.peek() == HEADING_MARKER:
        stream.advance()
        level += 1
    stream.skip_spaces()
    text = stream.take_line()
    stream.skip_newline()
    return Heading(level=level, inline=parse_inline(text, options))


def _parse_paragraph(stream: CharStream, options: ParserOptions) -> Paragraph:
    chars: list[str] = []
    while not stream.is_end():
        ch = stream.advance()
        if ch == NEWLINE:
            if stream.is_end() or stream.skip_newline():
                break
        chars.append(ch)
    return Paragraph(inline=parse_inline("".join(chars), options))


def _parse_blockquote(stream: CharStream, options: ParserOptions) -> BlockQuote:
    lines: list[str] = []
    while stream.peek() == QUOTE_MARKER:
        stream.advance()
        stream.skip_spaces()
        lines.append(stream.take_line())
        stream.skip_newline()
    # Joined without a trailing line break after the last quoted line.
    return BlockQuote(inline=parse_inline(NEWLINE.join(lines), options))


def _parse_dash_block(stream: CharStream, options: ParserOptions) -> Block:
    """Parse a block opened by ``-``: a horizontal rule or an unordered list."""
    stream.advance()
    run = 1
    while stream.peek() == UNORDERED_MARKER:
        stream.advance()
        run += 1
    if run == 1:
        stream.skip_spaces()
    rest = stream.take_line()
    if options.horizontal_rules and run >= options.min_rule_length and not rest.strip():
        stream.skip_newline()
        return HorizontalRule()
    first_item = UNORDERED_MARKER * (run - 1) + rest
    items = [ListItem(inline=parse_inline(first_item, options))]
    return _parse_list(stream, options, ordered=False, items=items)


def _parse_list(
    stream: CharStream,
    options: ParserOptions,
    ordered: bool,
    items: List[ListItem] | None = None,
) -> ListBlock:
    items = items if items is not None else []
    while not stream.is_end():
        ch = stream.peek()
        if ch.isspace():
            stream.advance()
            continue
        if ordered and ch in DIGITS:
            stream.advance()
            while stream.peek() is not None and stream.peek() in DIGITS + ORDINAL_PUNCTUATION:
                stream.advance()
        elif not ordered and ch == UNORDERED_MARKER:
            stream.advance()
        else:
            break
        stream.skip_spaces()
        items.append(ListItem(inline=parse_inline(stream.take_line(), options)))
    return ListBlock(items=items, ordered=ordered)


def _parse_code(stream: CharStream) -> CodeBlock:
    """Parse a code span or fenced block; the first backtick is already consumed."""
    width = 1
    while width < MAX_FENCE_WIDTH and stream.peek() == FENCE_MARKER:
        stream.advance()
        width += 1

    chars: list[str] = []
    if width == 1:
        while not stream.is_end():
            ch = stream.advance()
            if ch == FENCE_MARKER:
                break
            chars.append(ch)
        return CodeBlock(code="".join(chars), fence_width=width)

    run = 0
    while not stream.is_end():
        ch = stream.advance()
        if ch == FENCE_MARKER:
            run += 1
            if run == width:
                # Drop the backticks of the closing fence already captured.
                del chars[len(chars) - (width - 1):]
                break
        else:
            run = 0
        chars.append(ch)
    return CodeBlock(code="".join(chars), fence_width=width)
