from __future__ import annotations

NEWLINE = "\n"


class CharStream:
    """Forward-only cursor over a string with one character of lookahead."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> str | None:
        """Return the next unconsumed character, or None at end of input."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def is_end(self) -> bool:
        return self.pos >= len(self.text)

    def advance(self) -> str | None:
        ch = self.peek()
        if ch is not None:
            self.pos += 1
        return ch

    def skip_spaces(self) -> None:
        """Skip whitespace on the current line, stopping at a line break."""
        while True:
            ch = self.peek()
            if ch is None or ch == NEWLINE or not ch.isspace():
                return
            self.pos += 1

    def skip_newline(self) -> bool:
        if self.peek() == NEWLINE:
            self.pos += 1
            return True
        return False

    def take_line(self) -> str:
        """Consume up to, not including, the next line break."""
        chars: list[str] = []
        while True:
            ch = self.peek()
            if ch is None or ch == NEWLINE:
                return "".join(chars)
            chars.append(ch)
            self.pos += 1
