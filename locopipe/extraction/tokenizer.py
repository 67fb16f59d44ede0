"""Splitting delimited rows into fields."""

from typing import List

from ..config import DEFAULT_DELIMITER


def split(line: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """
    Split a row on every literal occurrence of the delimiter.

    Quotes and escapes are not interpreted, and empty trailing fields are kept.
    An empty line yields a single empty field.

    Args:
        line: The row text, without its line terminator
        delimiter: The token separating fields

    Returns:
        List of field values, in column order
    """
    if not delimiter:
        return [line]
    return line.split(delimiter)
