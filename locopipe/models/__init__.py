"""Data models for the localization pipeline."""

from .localization_entry import NO_COMMENT, LocalizationEntry
from .conversion_result import ConversionResult, ParseWarning

__all__ = [
    "NO_COMMENT",
    "LocalizationEntry",
    "ConversionResult",
    "ParseWarning",
]
