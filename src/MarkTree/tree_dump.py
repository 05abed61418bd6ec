from __future__ import annotations

from typing import Any, Iterable, List

import yaml

from .model import (
    Block,
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    InlineBold,
    InlineElement,
    InlineItalic,
    InlineText,
    ListBlock,
    Paragraph,
)

INDENT = "  "


def document_to_data(doc: Document) -> list[dict[str, Any]]:
    """Convert the AST into plain lists and dicts, ready for any serializer."""
    return [_block_to_data(block) for block in doc.blocks]


def dump_yaml(doc: Document) -> str:
    return yaml.safe_dump(
        document_to_data(doc),
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
    )


def format_tree(doc: Document) -> str:
    """Render the AST as an indented outline, one node per line."""
    lines: List[str] = ["Document"]
    for block in doc.blocks:
        _block_lines(block, 1, lines)
    return "\n".join(lines) + "\n"


def _block_to_data(block: Block) -> dict[str, Any]:
    if isinstance(block, Heading):
        return {"type": "heading", "level": block.level, "inline": _inline_to_data(block.inline)}
    if isinstance(block, Paragraph):
        return {"type": "paragraph", "inline": _inline_to_data(block.inline)}
    if isinstance(block, BlockQuote):
        return {"type": "blockquote", "inline": _inline_to_data(block.inline)}
    if isinstance(block, ListBlock):
        return {
            "type": "list",
            "kind": block.kind.value,
            "items": [_inline_to_data(item.inline) for item in block.items],
        }
    if isinstance(block, CodeBlock):
        return {"type": "code", "fence_width": block.fence_width, "code": block.code}
    if isinstance(block, HorizontalRule):
        return {"type": "horizontal_rule"}
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def _inline_to_data(elements: Iterable[InlineElement]) -> list[dict[str, Any]]:
    result: list[dict[str, Any]] = []
    for element in elements:
        if isinstance(element, InlineText):
            result.append({"text": element.text})
        elif isinstance(element, InlineBold):
            result.append({"bold": _inline_to_data(element.children)})
        elif isinstance(element, InlineItalic):
            result.append({"italic": _inline_to_data(element.children)})
        else:
            raise TypeError(f"Unsupported inline type: {type(element).__name__}")
    return result


def _block_lines(block: Block, depth: int, lines: List[str]) -> None:
    pad = INDENT * depth
    if isinstance(block, Heading):
        lines.append(f"{pad}Heading level={block.level}")
        _inline_lines(block.inline, depth + 1, lines)
    elif isinstance(block, Paragraph):
        lines.append(f"{pad}Paragraph")
        _inline_lines(block.inline, depth + 1, lines)
    elif isinstance(block, BlockQuote):
        lines.append(f"{pad}BlockQuote")
        _inline_lines(block.inline, depth + 1, lines)
    elif isinstance(block, ListBlock):
        lines.append(f"{pad}List {block.kind.value}")
        for item in block.items:
            lines.append(f"{pad}{INDENT}Item")
            _inline_lines(item.inline, depth + 2, lines)
    elif isinstance(block, CodeBlock):
        lines.append(f"{pad}Code {block.code!r}")
    elif isinstance(block, HorizontalRule):
        lines.append(f"{pad}HorizontalRule")
    else:
        raise TypeError(f"Unsupported block type: {type(block).__name__}")


def _inline_lines(elements: Iterable[InlineElement], depth: int, lines: List[str]) -> None:
    pad = INDENT * depth
    for element in elements:
        if isinstance(element, InlineText):
            lines.append(f"{pad}Text {element.text!r}")
        elif isinstance(element, InlineBold):
            lines.append(f"{pad}Bold")
            _inline_lines(element.children, depth + 1, lines)
        elif isinstance(element, InlineItalic):
            lines.append(f"{pad}Italic")
            _inline_lines(element.children, depth + 1, lines)
        else:
            raise TypeError(f"Unsupported inline type: {type(element).__name__}")
