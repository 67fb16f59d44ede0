import codecs
from pathlib import Path

import pytest

from locopipe.errors import UnsupportedEncoding
from locopipe.extraction.strings_parser import StringsFileParser
from locopipe.extraction.strings_writer import StringsFileWriter
from locopipe.models import NO_COMMENT, LocalizationEntry


def test_parses_comment_key_and_value():
    parser = StringsFileParser()
    entries = parser.parse_string('/* Hello */\n"greeting" = "Hello";\n\n')

    assert entries == {"greeting": LocalizationEntry("greeting", "Hello", "Hello")}
    assert parser.warnings == []


def test_missing_comment_uses_sentinel():
    entries = StringsFileParser().parse_string('"a" = "b";\n')
    assert entries["a"].comment == NO_COMMENT


def test_comment_applies_only_to_next_entry():
    content = '/* first */\n"a" = "1";\n"b" = "2";\n'
    entries = StringsFileParser().parse_string(content)

    assert entries["a"].comment == "first"
    assert entries["b"].comment == NO_COMMENT


def test_repeated_key_keeps_last_value():
    content = '"a" = "1";\n/* again */\n"a" = "2";\n'
    entries = StringsFileParser().parse_string(content)

    assert len(entries) == 1
    assert entries["a"].value == "2"
    assert entries["a"].comment == "again"


def test_indented_lines_and_crlf():
    content = '  /* c */  \r\n   "k" = "v";  \r\n'
    entries = StringsFileParser().parse_string(content)
    assert entries["k"] == LocalizationEntry("k", "v", "c")


def test_value_containing_separator_and_quotes():
    entries = StringsFileParser().parse_string('"k" = "say "hi" = "ok"";\n')
    assert entries["k"].value == 'say "hi" = "ok"'


def test_malformed_value_is_kept_with_warning():
    parser = StringsFileParser()
    entries = parser.parse_string('/* c */\n"k" = "broken\n"next" = "fine";\n', source=Path("x.strings"))

    assert entries["k"].value == "broken"
    assert entries["next"].value == "fine"
    assert len(parser.warnings) == 1
    warning = parser.warnings[0]
    assert warning.line_number == 2
    assert str(warning).startswith("x.strings:2:")


def test_ignores_unrelated_lines():
    content = '// line comment\n"a" = "1";\nnot an entry\n'
    entries = StringsFileParser().parse_string(content)
    assert list(entries) == ["a"]


def test_parse_reads_file(tmp_path):
    path = tmp_path / "Localizable.strings"
    StringsFileWriter().write([LocalizationEntry("k", "v", "c")], path)

    assert path.read_text(encoding="utf-8") == '/* c */\n"k" = "v";\n\n'
    assert StringsFileParser().parse(path) == {"k": LocalizationEntry("k", "v", "c")}


def test_quoted_line_without_value_is_skipped_with_warning():
    parser = StringsFileParser()
    entries = parser.parse_string('/* lost */\n"orphan";\n"a" = "1";\n')

    assert list(entries) == ["a"]
    assert entries["a"].comment == NO_COMMENT
    assert len(parser.warnings) == 1
    assert parser.warnings[0].line_number == 2


def test_warning_names_language(tmp_path):
    path = tmp_path / "Localizable.strings"
    path.write_text('"k" = "broken\n', encoding="utf-8")

    parser = StringsFileParser()
    parser.parse(path, language_code="de")

    assert parser.warnings[0].language_code == "de"
    assert str(parser.warnings[0]).startswith(f"de: {path}:1:")


def test_utf8_byte_order_mark_keeps_first_entry(tmp_path):
    path = tmp_path / "Localizable.strings"
    path.write_text('"first" = "1";\n"second" = "2";\n', encoding="utf-8-sig")

    parser = StringsFileParser()
    assert list(parser.parse(path)) == ["first", "second"]
    assert parser.warnings == []


@pytest.mark.parametrize("encoding", ["utf-16", "utf-16-le", "utf-16-be"])
def test_utf16_files_are_read(tmp_path, encoding):
    path = tmp_path / "Localizable.strings"
    content = '/* Hello */\n"greeting" = "Grüß dich";\n'
    bom = b"" if encoding == "utf-16" else (
        codecs.BOM_UTF16_LE if encoding == "utf-16-le" else codecs.BOM_UTF16_BE
    )
    path.write_bytes(bom + content.encode(encoding))

    entries = StringsFileParser().parse(path)
    assert entries == {"greeting": LocalizationEntry("greeting", "Grüß dich", "Hello")}


def test_undecodable_file_raises_unsupported_encoding(tmp_path):
    path = tmp_path / "Localizable.strings"
    path.write_bytes(b'"k" = "\xff\xff";\n')

    with pytest.raises(UnsupportedEncoding):
        StringsFileParser().parse(path)
