from pathlib import Path

import pytest

from locopipe.config import GeneratorConfiguration, ParserConfiguration

TAB = "\\t"


def make_sheet(*rows):
    """Join rows of cells with the literal \\t delimiter."""
    return "".join(TAB.join(cells) + "\n" for cells in rows)


def write_strings(
    root: Path,
    language: str,
    content: str,
    name: str = "Localizable.strings",
    encoding: str = "utf-8",
) -> Path:
    folder = root / f"{language}.lproj"
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / name
    path.write_text(content, encoding=encoding)
    return path


@pytest.fixture
def parser_config(tmp_path):
    def _build(input_file=None, name="Localizable", delimiter=TAB):
        return ParserConfiguration(
            name=name,
            input_file=input_file or tmp_path / "input.tsv",
            output_folder=tmp_path / "out",
            delimiter=delimiter,
        )

    return _build


@pytest.fixture
def generator_config(tmp_path):
    def _build(reference="en", name="Localizable", delimiter=TAB):
        return GeneratorConfiguration(
            name=name,
            input_folder=tmp_path / "tree",
            output_file=tmp_path / "sheet" / "output.tsv",
            reference_language_code=reference,
            delimiter=delimiter,
        )

    return _build
