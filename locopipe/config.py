"""Configuration management for the localization pipeline."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List
from dotenv import load_dotenv

load_dotenv()

# Literal backslash-t, not a tab byte. Some spreadsheet importers choke on real tabs.
DEFAULT_DELIMITER = "\\t"
LANGUAGE_FOLDER_EXTENSION = "lproj"
STRINGS_FILE_EXTENSION = ".strings"
COMMENTS_HEADER = "Comments"
KEY_HEADER = "iOS Key"


@dataclass
class Config:
    """Application configuration."""

    delimiter: str = field(
        default_factory=lambda: os.getenv("LOCOPIPE_DELIMITER", DEFAULT_DELIMITER)
    )
    reference_language_code: str = field(
        default_factory=lambda: os.getenv("LOCOPIPE_REFERENCE_LANGUAGE", "")
    )
    default_name: str = field(
        default_factory=lambda: os.getenv("LOCOPIPE_NAME", "Localizable")
    )

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not self.delimiter:
            errors.append("LOCOPIPE_DELIMITER must not be empty")
        if not self.default_name:
            errors.append("LOCOPIPE_NAME must not be empty")
        return errors


@dataclass(frozen=True)
class ParserConfiguration:
    """Settings for turning a .tsv sheet into .lproj folders."""

    name: str
    input_file: Path
    output_folder: Path
    delimiter: str = DEFAULT_DELIMITER
    verbose: bool = False


@dataclass(frozen=True)
class GeneratorConfiguration:
    """Settings for turning .lproj folders back into a .tsv sheet."""

    name: str  # name of the .strings file in the input folders
    input_folder: Path
    output_file: Path
    reference_language_code: str
    delimiter: str = DEFAULT_DELIMITER
    verbose: bool = False


# Global config instance
config = Config()
