"""Validation of command-line arguments."""

from .arguments import ValidationError, validate_generator_arguments, validate_parser_arguments

__all__ = ["ValidationError", "validate_generator_arguments", "validate_parser_arguments"]
