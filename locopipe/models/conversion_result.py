"""Data models for conversion results and parse diagnostics."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from .localization_entry import LocalizationEntry


@dataclass(frozen=True)
class ParseWarning:
    """A recoverable problem found while reading a .strings file."""

    file_path: Path
    line_number: int
    message: str
    language_code: str = ""

    def __str__(self) -> str:
        location = f"{self.file_path}:{self.line_number}"
        if self.language_code:
            location = f"{self.language_code}: {location}"
        return f"{location}: {self.message}"


@dataclass
class ConversionResult:
    """Represents the outcome of one parse or generate pass."""

    languages: List[str] = field(default_factory=list)
    entry_count: int = 0
    files_written: List[Path] = field(default_factory=list)
    warnings: List[ParseWarning] = field(default_factory=list)
    entries: Dict[str, List[LocalizationEntry]] = field(default_factory=dict)

    @property
    def has_warnings(self) -> bool:
        """Check if any recoverable problems were reported."""
        return len(self.warnings) > 0
