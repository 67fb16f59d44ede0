"""Converters between .tsv sheets and .lproj folders."""

from .tsv_file_parser import TSVFileParser
from .tsv_file_generator import TSVFileGenerator

__all__ = ["TSVFileParser", "TSVFileGenerator"]
