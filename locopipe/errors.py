"""Errors raised by the TSV and .strings converters."""


class LocoPipeError(Exception):
    """Base class for conversion failures with a printable description."""

    description = "An unknown error occurred."

    def __init__(self, description: str = ""):
        if description:
            self.description = description
        super().__init__(self.description)


class NoContent(LocoPipeError):
    """The expected input had nothing to parse."""

    description = "There was no content provided in the input location provided."


class UnexpectedFormat(LocoPipeError):
    """The header or structure does not match the minimum required shape."""

    description = (
        "The provided .tsv sheet was not in the expected format. There should be "
        "Columns [Comments, iOS Key], then language codes for each language you want to support."
    )


class UnsupportedOutputFormat(LocoPipeError):
    """Reserved for output targets other than .strings files."""

    description = (
        "Currently this tool only supports output to Localizable.strings type "
        "iOS / macOS localization format."
    )


class InternalError(LocoPipeError):
    """A structural invariant was violated after validation."""

    def __init__(self, details: str):
        self.details = details
        super().__init__(f"An internal error occurred: {details}")


class UnsupportedEncoding(LocoPipeError):
    """The input file could not be decoded as UTF-8 or UTF-16."""

    def __init__(self, file_path):
        self.file_path = file_path
        super().__init__(
            f"Could not read {file_path}. Files must be UTF-8 or UTF-16 with a byte order mark."
        )
