from pathlib import Path

import pytest
import yaml

from MarkTree import cli
from MarkTree.utils import SourceUnavailableError, read_markdown, resolve_output_path


def test_cli_prints_tree(tmp_path: Path, capsys):
    source = tmp_path / "note.md"
    source.write_text("# Hello\n", encoding="utf-8")
    assert cli.main([str(source)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["Document", "  Heading level=1", "    Text 'Hello'"]


def test_cli_writes_yaml_into_directory(tmp_path: Path):
    source = tmp_path / "note.md"
    source.write_text("*a\nb*\n", encoding="utf-8")
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    assert cli.main([str(source), "-o", str(out_dir), "--format", "yaml", "--line-scoped"]) == 0
    data = yaml.safe_load((out_dir / "note.yaml").read_text(encoding="utf-8"))
    assert data == [
        {"type": "paragraph", "inline": [{"bold": [{"text": "a"}]}, {"text": "\nb"}, {"bold": []}]}
    ]


def test_cli_uses_options_file(tmp_path: Path, capsys):
    source = tmp_path / "rule.md"
    source.write_text("---\n", encoding="utf-8")
    config = tmp_path / "options.yaml"
    config.write_text("horizontal_rules: false\n", encoding="utf-8")
    assert cli.main([str(source), "--config", str(config)]) == 0
    assert "List unordered" in capsys.readouterr().out


def test_cli_missing_source_returns_error(tmp_path: Path):
    assert cli.main([str(tmp_path / "missing.md")]) == 1


@pytest.mark.parametrize("content", ["nope: 1\n", "max_inline_depth: [1\n", "1: 2\n"])
def test_cli_bad_options_returns_error(tmp_path: Path, content):
    source = tmp_path / "note.md"
    source.write_text("x\n", encoding="utf-8")
    config = tmp_path / "options.yaml"
    config.write_text(content, encoding="utf-8")
    assert cli.main([str(source), "--config", str(config)]) == 2


def test_read_markdown_rejects_invalid_utf8(tmp_path: Path):
    source = tmp_path / "binary.md"
    source.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(SourceUnavailableError):
        read_markdown(source)


def test_resolve_output_path(tmp_path: Path):
    source = tmp_path / "note.md"
    assert resolve_output_path(source, str(tmp_path), ".yaml") == tmp_path / "note.yaml"
    assert resolve_output_path(source, str(tmp_path / "dump.txt"), ".yaml") == tmp_path / "dump.txt"
