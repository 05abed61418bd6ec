from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import markdown_parser, tree_dump
from .options import ParserOptions, load_options
from .utils import SourceUnavailableError, configure_logging, read_markdown, resolve_output_path

FORMAT_SUFFIXES = {"tree": ".txt", "yaml": ".yaml"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marktree",
        description="Parse Markdown-like text and print its document tree.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Write the dump to this file or directory")
    parser.add_argument("--format", choices=sorted(FORMAT_SUFFIXES), default="tree", help="Dump format")
    parser.add_argument("--config", type=str, help="YAML file with parser options")
    parser.add_argument("--line-scoped", action="store_true", help="Close bold/italic spans at line breaks")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        options = load_options(Path(args.config).expanduser()) if args.config else ParserOptions()
    except (OSError, ValueError) as exc:
        logging.error("Invalid options: %s", exc)
        return 2
    if args.line_scoped:
        options.line_scoped_spans = True

    input_path = Path(args.input).expanduser()
    logging.info("Reading %s", input_path)
    try:
        markdown_text = read_markdown(input_path)
    except SourceUnavailableError as exc:
        logging.error("%s", exc)
        return 1
    logging.debug("Markdown length: %d chars", len(markdown_text))

    logging.info("Parsing markdown...")
    document = markdown_parser.parse_markdown(markdown_text, options)

    if args.format == "yaml":
        dump = tree_dump.dump_yaml(document)
    else:
        dump = tree_dump.format_tree(document)

    if args.output:
        output_path = resolve_output_path(input_path, args.output, FORMAT_SUFFIXES[args.format])
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(dump, encoding="utf-8")
        logging.info("Done. Saved to %s", output_path)
    else:
        sys.stdout.write(dump)
    return 0


if __name__ == "__main__":
    sys.exit(main())
