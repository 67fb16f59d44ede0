"""Converts a delimited .tsv sheet into per-language .strings files."""

from pathlib import Path
from typing import Dict, List

from ..config import LANGUAGE_FOLDER_EXTENSION, STRINGS_FILE_EXTENSION, ParserConfiguration
from ..errors import InternalError, NoContent, UnexpectedFormat
from ..extraction import tokenizer
from ..extraction.strings_writer import StringsFileWriter
from ..extraction.text_reader import read_text
from ..models.conversion_result import ConversionResult
from ..models.localization_entry import NO_COMMENT, LocalizationEntry

COMMENTS_COLUMN = 0
KEY_COLUMN = 1
# Comments and iOS Key; language columns start after these.
NON_LANGUAGE_COLUMNS = 2


class TSVFileParser:
    """
    Splits a sheet of `Comments, iOS Key, <lang>...` rows into .lproj folders.

    Every row is validated before anything is written, so a malformed sheet
    leaves the output folder untouched. Entries keep the sheet's row order.
    """

    def __init__(self, configuration: ParserConfiguration):
        self.configuration = configuration
        self.writer = StringsFileWriter()

    @property
    def output_file_name(self) -> str:
        """Name of the .strings file written into each language folder."""
        name = self.configuration.name
        if STRINGS_FILE_EXTENSION in name:
            return name
        return f"{name}{STRINGS_FILE_EXTENSION}"

    @staticmethod
    def get_column_values(line: str, delimiter: str) -> List[str]:
        """Tokenize one sheet row."""
        return tokenizer.split(line, delimiter)

    def parse_and_generate_output(self) -> ConversionResult:
        """Read the configured input file and write the .lproj folders."""
        contents = read_text(Path(self.configuration.input_file))
        return self.parse(contents)

    def parse(self, contents: str) -> ConversionResult:
        """Parse sheet contents and export them."""
        results = self.parse_into_data_structure(contents)
        files_written = self.export(results)
        return ConversionResult(
            languages=list(results.keys()),
            entry_count=sum(len(entries) for entries in results.values()),
            files_written=files_written,
            entries=results,
        )

    def parse_into_data_structure(self, contents: str) -> Dict[str, List[LocalizationEntry]]:
        """
        Group sheet rows by language.

        Args:
            contents: The whole sheet as one string

        Returns:
            Dict of language code -> entries in row order, languages in header order
        """
        delimiter = self.configuration.delimiter
        rows = [row for row in contents.splitlines() if row.strip()]
        if not rows:
            raise NoContent()

        column_headers = self.get_column_values(rows[0], delimiter)
        if len(column_headers) < NON_LANGUAGE_COLUMNS + 1:
            raise UnexpectedFormat()

        language_columns: Dict[str, int] = {}
        for index in range(NON_LANGUAGE_COLUMNS, len(column_headers)):
            language_code = column_headers[index].strip()
            if not language_code:
                raise UnexpectedFormat(
                    f"Column {index + 1} of the header has no language code. "
                    + UnexpectedFormat.description
                )
            language_columns[language_code] = index

        expected_columns = NON_LANGUAGE_COLUMNS + len(language_columns)
        entries_by_language: Dict[str, List[LocalizationEntry]] = {
            code: [] for code in language_columns
        }

        for line_number, row in enumerate(rows[1:], start=2):
            columns = self.get_column_values(row, delimiter)
            if len(columns) != expected_columns:
                raise InternalError(
                    f"Row {line_number} has {len(columns)} columns. There should be "
                    f"{NON_LANGUAGE_COLUMNS} columns + number of detected languages "
                    f"({expected_columns}) in the .tsv sheet"
                )

            key = columns[KEY_COLUMN].strip()
            comment = columns[COMMENTS_COLUMN].strip() or NO_COMMENT
            for code, column in language_columns.items():
                entries_by_language[code].append(
                    LocalizationEntry(key=key, value=columns[column].strip(), comment=comment)
                )

        return {code: entries for code, entries in entries_by_language.items() if entries}

    def export(self, results: Dict[str, List[LocalizationEntry]]) -> List[Path]:
        """
        Write one .strings file per language.

        Stops at the first write failure; files already written are kept.

        Returns:
            Paths of the files written
        """
        written = []
        output_folder = Path(self.configuration.output_folder)
        for code, entries in results.items():
            language_folder = output_folder / f"{code}.{LANGUAGE_FOLDER_EXTENSION}"
            language_folder.mkdir(parents=True, exist_ok=True)

            output_path = language_folder / self.output_file_name
            self.writer.write(entries, output_path)
            written.append(output_path)
        return written
