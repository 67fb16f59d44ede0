"""Checks command-line paths before a converter runs."""

from pathlib import Path
from typing import Optional

import click

from ..config import (
    DEFAULT_DELIMITER,
    LANGUAGE_FOLDER_EXTENSION,
    GeneratorConfiguration,
    ParserConfiguration,
)


class ValidationError(click.UsageError):
    """Raised when the given paths or options cannot be used."""


def validate_parser_arguments(
    name: str,
    input_path: Optional[str],
    output_path: Optional[str],
    delimiter: Optional[str] = None,
    verbose: bool = False,
) -> ParserConfiguration:
    """
    Build a parser configuration from raw CLI values.

    The output folder is created when missing.

    Raises:
        ValidationError: If an argument is missing or points at the wrong kind of path
    """
    if not input_path:
        raise ValidationError("You need to provide an input argument or else this tool won't work!")
    if not output_path:
        raise ValidationError("You need to provide an output argument or else this tool won't work!")

    input_file = Path(input_path).resolve()
    if not input_file.is_file():
        raise ValidationError(f"No file was found at {input_path}!")

    output_folder = Path(output_path).resolve()
    if output_folder.exists():
        if not output_folder.is_dir():
            raise ValidationError("The provided output path is not a directory but needs to be!")
    else:
        output_folder.mkdir(parents=True, exist_ok=True)

    return ParserConfiguration(
        name=name,
        input_file=input_file,
        output_folder=output_folder,
        delimiter=delimiter or DEFAULT_DELIMITER,
        verbose=verbose,
    )


def validate_generator_arguments(
    name: str,
    input_path: Optional[str],
    output_path: Optional[str],
    reference_language_code: Optional[str],
    delimiter: Optional[str] = None,
    verbose: bool = False,
) -> GeneratorConfiguration:
    """
    Build a generator configuration from raw CLI values.

    The output file's parent folder is created when missing.

    Raises:
        ValidationError: If an argument is missing, the input is not a folder,
            or the folder holds no .lproj folders or no reference language
    """
    if not input_path:
        raise ValidationError("You need to provide an input argument or else this tool won't work!")
    if not output_path:
        raise ValidationError("You need to provide an output argument or else this tool won't work!")
    if not reference_language_code:
        raise ValidationError(
            "You need to provide a language code of the strings folder that will be "
            "treated as the reference language."
        )

    output_file = Path(output_path).resolve()
    output_file.parent.mkdir(parents=True, exist_ok=True)

    input_folder = Path(input_path).resolve()
    if not input_folder.exists():
        raise ValidationError("The provided input path could not be found!")
    if not input_folder.is_dir():
        raise ValidationError("The provided input path is not a directory but needs to be!")

    names = [path.name for path in input_folder.iterdir()]
    if not any(LANGUAGE_FOLDER_EXTENSION in folder_name for folder_name in names):
        raise ValidationError(
            "The input folder provided does not contain any Localizable content folder "
            f"(i.e. .{LANGUAGE_FOLDER_EXTENSION} folder)"
        )
    if not any(reference_language_code in folder_name for folder_name in names):
        raise ValidationError(
            "The input folder provided does not contain the specified reference language!"
        )

    return GeneratorConfiguration(
        name=name,
        input_folder=input_folder,
        output_file=output_file,
        reference_language_code=reference_language_code,
        delimiter=delimiter or DEFAULT_DELIMITER,
        verbose=verbose,
    )
