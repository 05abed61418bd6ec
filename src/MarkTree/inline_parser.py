from __future__ import annotations

from typing import List

from .model import InlineBold, InlineElement, InlineItalic, InlineText
from .options import BOLD_MARKER, ITALIC_MARKER, ParserOptions
from .scanner import NEWLINE, CharStream

_SPAN_TYPES = {
    BOLD_MARKER: InlineBold,
    ITALIC_MARKER: InlineItalic,
}


def parse_inline(text: str, options: ParserOptions | None = None) -> List[InlineElement]:
    """Split the text of one block into plain, bold and italic spans.

    Spans are scoped to their own closing marker rather than matched on a
    stack, so an unterminated ``*`` or ``_`` runs to the end of ``text``.
    """
    options = options or ParserOptions()
    return _parse_spans(CharStream(text), None, options, depth=0)


def _parse_spans(
    stream: CharStream,
    closer: str | None,
    options: ParserOptions,
    depth: int,
) -> List[InlineElement]:
    result: List[InlineElement] = []
    pending: list[str] = []

    def flush() -> None:
        if pending:
            result.append(InlineText("".join(pending)))
            pending.clear()

    while not stream.is_end():
        ch = stream.peek()
        if closer is not None:
            if ch == closer:
                stream.advance()
                break
            # The line break is left for the top level, where it is plain text.
            if options.line_scoped_spans and ch == NEWLINE:
                break
        span_type = _SPAN_TYPES.get(ch)
        if span_type is not None and depth < options.max_inline_depth:
            flush()
            stream.advance()
            children = _parse_spans(stream, ch, options, depth + 1)
            result.append(span_type(children))
            continue
        pending.append(ch)
        stream.advance()
    flush()
    return result
