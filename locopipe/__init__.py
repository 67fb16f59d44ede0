"""Convert .tsv sheet exports to and from Localizable.strings folders."""

__version__ = "0.1.0"
