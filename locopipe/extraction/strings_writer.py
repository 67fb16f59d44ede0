"""Writer for Apple's .strings resource format."""

from pathlib import Path
from typing import Iterable

from ..models.localization_entry import LocalizationEntry


class StringsFileWriter:
    """Writer for .strings files."""

    def write(self, entries: Iterable[LocalizationEntry], output_path: Path) -> None:
        """
        Write entries to disk in the order given.

        Args:
            entries: Entries to write
            output_path: Path to write the file to
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_string(entries), encoding="utf-8")

    def to_string(self, entries: Iterable[LocalizationEntry]) -> str:
        """Render entries as .strings content."""
        return "".join(entry.to_strings_block() for entry in entries)
