from __future__ import annotations

import logging
from pathlib import Path


class SourceUnavailableError(OSError):
    """The markdown source could not be read or decoded."""


def configure_logging(verbose: bool = False) -> None:
    """Configure a simple console logger."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(message)s",
    )


def resolve_output_path(input_path: Path, output: str, suffix: str) -> Path:
    out_path = Path(output)
    if out_path.is_dir():
        out_path = out_path / f"{input_path.stem}{suffix}"
    return out_path


def read_markdown(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(f"Cannot read markdown source {path}: {exc}") from exc
