"""Converts per-language .strings files back into one delimited .tsv sheet."""

from pathlib import Path
from typing import Dict, List, Optional

from ..config import (
    COMMENTS_HEADER,
    KEY_HEADER,
    LANGUAGE_FOLDER_EXTENSION,
    STRINGS_FILE_EXTENSION,
    GeneratorConfiguration,
)
from ..errors import InternalError, NoContent
from ..extraction.strings_parser import StringsFileParser
from ..models.conversion_result import ConversionResult
from ..models.localization_entry import LocalizationEntry

# language code -> key -> entry
ParsedLanguages = Dict[str, Dict[str, LocalizationEntry]]


class TSVFileGenerator:
    """
    Rebuilds a sheet from a folder of `<code>.lproj/<name>.strings` files.

    The reference language decides which keys become rows and is always the
    first language column. Rows are sorted by key. A language that lacks a key
    gets the reference value in that cell.
    """

    def __init__(self, configuration: GeneratorConfiguration):
        self.configuration = configuration
        self.strings_parser = StringsFileParser()

    def parse_and_generate_output(self) -> ConversionResult:
        """Parse every language folder and write the sheet."""
        parsed = self.parse_languages()
        output_path = self.generate_tsv_file(parsed)

        reference = parsed[self.configuration.reference_language_code]
        return ConversionResult(
            languages=self.column_order(parsed),
            entry_count=len(reference),
            files_written=[output_path],
            warnings=list(self.strings_parser.warnings),
            entries={
                code: [parsed[code][key] for key in sorted(parsed[code])]
                for code in self.column_order(parsed)
            },
        )

    def parse_languages(self) -> ParsedLanguages:
        """
        Parse the .strings file of every .lproj folder under the input folder.

        Returns:
            Dict of language code -> (key -> entry)
        """
        suffix = f".{LANGUAGE_FOLDER_EXTENSION}"
        parsed: ParsedLanguages = {}

        for folder in sorted(Path(self.configuration.input_folder).iterdir()):
            if not folder.is_dir() or not folder.name.endswith(suffix):
                continue
            language_code = folder.name[: -len(suffix)]

            file_to_parse = self.find_strings_file(folder)
            if file_to_parse is None:
                raise NoContent(f"No {STRINGS_FILE_EXTENSION} file was found in {folder}.")

            parsed[language_code] = self.parse(language_code, file_to_parse)

        return parsed

    def find_strings_file(self, folder: Path) -> Optional[Path]:
        """Pick the configured .strings file, else the first one by name."""
        candidates = sorted(
            path for path in folder.iterdir()
            if path.is_file() and STRINGS_FILE_EXTENSION in path.name
        )
        if not candidates:
            return None

        name = self.configuration.name
        wanted = name if STRINGS_FILE_EXTENSION in name else f"{name}{STRINGS_FILE_EXTENSION}"
        for path in candidates:
            if path.name == wanted:
                return path
        return candidates[0]

    def parse(self, language_code: str, file_path: Path) -> Dict[str, LocalizationEntry]:
        """Parse one language's .strings file."""
        return self.strings_parser.parse(file_path, language_code=language_code)

    def column_order(self, parsed: ParsedLanguages) -> List[str]:
        """Reference language first, then the others sorted."""
        reference_code = self.configuration.reference_language_code
        others = sorted(code for code in parsed if code != reference_code)
        return [reference_code] + others

    def generate_tsv(self, parsed: ParsedLanguages) -> str:
        """
        Build the sheet text.

        Args:
            parsed: Output of `parse_languages`

        Returns:
            The full sheet, one row per reference key, newline terminated
        """
        reference_code = self.configuration.reference_language_code
        delimiter = self.configuration.delimiter

        reference_language = parsed.get(reference_code)
        if reference_language is None:
            raise InternalError(
                f"Did not expect there to be no reference language content for "
                f"'{reference_code}' at this point."
            )

        other_codes = self.column_order(parsed)[1:]
        header = [COMMENTS_HEADER, KEY_HEADER, reference_code] + other_codes
        lines = [delimiter.join(header)]

        for key in sorted(reference_language):
            reference_entry = reference_language[key]
            row = [reference_entry.comment, reference_entry.key, reference_entry.value]
            for code in other_codes:
                translated = parsed[code].get(key)
                row.append(translated.value if translated else reference_entry.value)
            lines.append(delimiter.join(row))

        return "\n".join(lines) + "\n"

    def generate_tsv_file(self, parsed: ParsedLanguages) -> Path:
        """Write the sheet to the configured output file."""
        output = self.generate_tsv(parsed)

        path = Path(self.configuration.output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(output, encoding="utf-8")
        return path
