"""Parser for Apple's .strings resource format."""

import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..models.localization_entry import NO_COMMENT, LocalizationEntry
from ..models.conversion_result import ParseWarning
from .text_reader import read_text

VALUE_TERMINATOR = '";'


class StringsFileParser:
    """
    Reads `/* comment */` and `"key" = "value";` lines into entries.

    A comment line applies to the next key/value line. Repeated keys keep the
    last value seen. Values missing their `";` terminator are kept as written
    and reported through `warnings`; quoted lines without an `=` are reported
    and skipped.
    """

    PAIR_PATTERN = re.compile(r'^"(?P<key>.*?)"\s*=\s*"(?P<value>.*)$')

    def __init__(self):
        self.warnings: List[ParseWarning] = []

    def parse(self, file_path: Path, language_code: str = "") -> Dict[str, LocalizationEntry]:
        """
        Parse a .strings file into a key to entry mapping.

        Args:
            file_path: Path to the .strings file, UTF-8 or UTF-16
            language_code: Language the file belongs to, used in warnings

        Returns:
            Dict of key -> LocalizationEntry, in file order
        """
        path = Path(file_path)
        return self.parse_string(read_text(path), source=path, language_code=language_code)

    def parse_string(
        self,
        content: str,
        source: Optional[Path] = None,
        language_code: str = "",
    ) -> Dict[str, LocalizationEntry]:
        """Parse .strings content already loaded into memory."""
        entries: Dict[str, LocalizationEntry] = {}
        current_comment: Optional[str] = None

        def warn(line_number: int, message: str):
            self.warnings.append(
                ParseWarning(
                    file_path=source or Path("<string>"),
                    line_number=line_number,
                    message=message,
                    language_code=language_code,
                )
            )

        for line_number, line in enumerate(content.splitlines(), start=1):
            trimmed = line.strip()
            if not trimmed:
                continue

            if trimmed.startswith("/*") and trimmed.endswith("*/"):
                current_comment = self.extract_comment(trimmed)
                continue

            if not trimmed.startswith('"'):
                continue

            pair = self.extract_pair(trimmed)
            if pair is None:
                warn(line_number, f"Skipped line without a value: {trimmed}")
                current_comment = None
                continue

            key, value, well_formed = pair
            if not well_formed:
                warn(line_number, f"Value for '{key}' likely had a formatting problem")

            entries[key] = LocalizationEntry(
                key=key,
                value=value,
                comment=current_comment if current_comment is not None else NO_COMMENT,
            )
            current_comment = None

        return entries

    @staticmethod
    def extract_comment(line: str) -> str:
        """Strip the comment delimiters and surrounding whitespace."""
        return line.replace("/*", "").replace("*/", "").strip()

    @classmethod
    def extract_pair(cls, line: str) -> Optional[Tuple[str, str, bool]]:
        """
        Split a `"key" = "value";` line.

        Returns:
            Tuple of (key, value, well_formed), or None when the line has no
            `=` followed by a quoted value. `well_formed` is False when the
            value did not end with `";`; the value is then kept as written.
        """
        match = cls.PAIR_PATTERN.match(line)
        if not match:
            return None

        key = match.group("key")
        value = match.group("value")
        if value.endswith(VALUE_TERMINATOR):
            return key, value[: -len(VALUE_TERMINATOR)], True
        return key, value, False
