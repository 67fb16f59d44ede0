"""Data models for a single localizable string."""

from dataclasses import dataclass

NO_COMMENT = "(No Comment)"


@dataclass(frozen=True)
class LocalizationEntry:
    """Represents one key/value pair of a language, with its comment."""

    key: str
    value: str
    comment: str = NO_COMMENT

    def to_strings_block(self) -> str:
        """Render this entry the way it appears in a .strings file."""
        return f'/* {self.comment} */\n"{self.key}" = "{self.value}";\n\n'
