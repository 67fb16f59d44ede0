import pytest

from locopipe.extraction.tokenizer import split


def test_splits_on_escaped_tab_literal():
    assert split("a\\tb\\tc", "\\t") == ["a", "b", "c"]


def test_default_delimiter_is_escaped_tab_literal():
    assert split("a\\tb") == ["a", "b"]


def test_real_tab_is_not_a_delimiter_by_default():
    assert split("a\tb") == ["a\tb"]


def test_empty_line_yields_single_empty_field():
    assert split("", "\\t") == [""]


def test_trailing_empty_fields_are_kept():
    assert split("a\\t\\t", "\\t") == ["a", "", ""]


@pytest.mark.parametrize(
    "line,expected",
    [
        ("Purpose / Comments\\tiOS Key\\ten", 3),
        ("Testing\\tTesting.MyKey.Name\\tWondering, can I have commas in a tsv?", 3),
        ('"quoted\\tvalue"\\tkey', 3),
    ],
)
def test_field_count_ignores_commas_and_quotes(line, expected):
    assert len(split(line, "\\t")) == expected


def test_custom_delimiter():
    assert split("a|b||c", "|") == ["a", "b", "", "c"]


def test_empty_delimiter_does_not_split():
    assert split("a,b", "") == ["a,b"]
