"""Command line entry point: evaluate a delimited sheet file into another."""

import argparse
import logging

from sheet_interpreter.errors import SheetError
from sheet_interpreter.interpreter import SheetInterpreter
from sheet_interpreter.reader import read_sheet
from sheet_interpreter.writer import format_sheet, save_text

USAGE_MESSAGE = "Please run with <input_file> and <output_file> as arguments."
READ_ERROR_MESSAGE = (
    "Error reading input file. Are you sure it exists and is readable?"
)
PROCESSING_ERROR_MESSAGE = (
    "Error processing input file - are you sure it is a valid spreadsheet?"
)
WRITE_ERROR_MESSAGE = "Error writing output file."

# Everything that means the sheet itself is broken
PROCESSING_ERRORS = (SheetError, ZeroDivisionError, RecursionError)


class UsageError(Exception):
    pass


class ArgumentParser(argparse.ArgumentParser):
    """Reports bad arguments through `main` instead of exiting with status 2."""

    def error(self, message: str):
        raise UsageError(message)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="sheet-interpreter",
        description="Evaluate a comma-delimited sheet of integer formulas.",
    )
    parser.add_argument(
        "paths", nargs="*", metavar="FILE", help="<input_file> <output_file>"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output"
    )
    parser.add_argument(
        "--no-cycle-detection",
        action="store_true",
        help="Let circular references recurse until Python's recursion limit",
    )
    parser.add_argument(
        "--recursion-limit",
        type=positive_int,
        default=None,
        help="Recursion limit used while evaluating, instead of one sized from the grid",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        args = build_parser().parse_args(argv)
    except UsageError as e:
        print(USAGE_MESSAGE)
        print(e)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if len(args.paths) != 2:
        print(USAGE_MESSAGE)
        return 1
    input_file, output_file = args.paths

    try:
        matrix = read_sheet(input_file)
    except (OSError, UnicodeDecodeError) as e:
        logging.debug(f"Reading {input_file} failed: {e!r}")
        print(READ_ERROR_MESSAGE)
        return 1

    try:
        interpreter = SheetInterpreter(
            matrix,
            detect_cycles=False if args.no_cycle_detection else None,
            max_depth=args.recursion_limit,
        )
        contents = format_sheet(interpreter.evaluate_all())
    except PROCESSING_ERRORS as e:
        logging.debug(f"Processing {input_file} failed: {e!r}")
        print(PROCESSING_ERROR_MESSAGE)
        return 1

    try:
        save_text(output_file, contents)
    except OSError as e:
        logging.debug(f"Writing {output_file} failed: {e!r}")
        print(WRITE_ERROR_MESSAGE)
        return 1

    return 0
