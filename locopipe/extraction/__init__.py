"""Row tokenizing and .strings file handling modules."""

from .tokenizer import split
from .strings_parser import StringsFileParser
from .strings_writer import StringsFileWriter
from .text_reader import read_text

__all__ = ["split", "read_text", "StringsFileParser", "StringsFileWriter"]
