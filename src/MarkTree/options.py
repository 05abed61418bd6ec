from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

HEADING_MARKER = "#"
UNORDERED_MARKER = "-"
ORDINAL_PUNCTUATION = "."
DIGITS = "0123456789"
FENCE_MARKER = "`"
QUOTE_MARKER = ">"
BOLD_MARKER = "*"
ITALIC_MARKER = "_"

MAX_FENCE_WIDTH = 3
DEFAULT_MAX_INLINE_DEPTH = 64
DEFAULT_MIN_RULE_LENGTH = 3


@dataclass
class ParserOptions:
    max_inline_depth: int = DEFAULT_MAX_INLINE_DEPTH
    # A line break closes every open bold/italic span.
    line_scoped_spans: bool = False
    horizontal_rules: bool = True
    min_rule_length: int = DEFAULT_MIN_RULE_LENGTH

    def __post_init__(self) -> None:
        for name in ("max_inline_depth", "min_rule_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        for name in ("line_scoped_spans", "horizontal_rules"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false")


def options_from_mapping(data: dict) -> ParserOptions:
    known = {f.name for f in fields(ParserOptions)}
    unknown = [str(key) for key in data if key not in known]
    if unknown:
        raise ValueError(f"Unknown parser options: {', '.join(unknown)}")
    return ParserOptions(**data)


def load_options(path: str | Path) -> ParserOptions:
    """Read parser options from a YAML mapping; an empty file means defaults."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Options file {path} is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("Options YAML root must be a mapping.")
    return options_from_mapping(data)
