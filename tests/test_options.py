import textwrap

import pytest

from MarkTree.options import DEFAULT_MAX_INLINE_DEPTH, ParserOptions, load_options


def test_load_options_from_yaml(tmp_path):
    config = tmp_path / "options.yaml"
    config.write_text(
        textwrap.dedent(
            """
            max_inline_depth: 8
            line_scoped_spans: true
            min_rule_length: 4
            """
        ),
        encoding="utf-8",
    )
    options = load_options(config)
    assert options == ParserOptions(max_inline_depth=8, line_scoped_spans=True, min_rule_length=4)


def test_empty_options_file_means_defaults(tmp_path):
    config = tmp_path / "empty.yaml"
    config.write_text("", encoding="utf-8")
    assert load_options(config).max_inline_depth == DEFAULT_MAX_INLINE_DEPTH


@pytest.mark.parametrize(
    "content",
    [
        "- not a mapping\n",
        "unknown_option: 1\n",
        "max_inline_depth: 0\n",
        "min_rule_length: yes\n",
        "horizontal_rules: 3\n",
        "max_inline_depth: [1\n",
        "1: 2\n",
        "1: 2\nabc: 3\n",
    ],
)
def test_invalid_options_raise_value_error(tmp_path, content):
    config = tmp_path / "bad.yaml"
    config.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_options(config)
