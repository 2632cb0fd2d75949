#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for bbhtml.

Reads BBCode from a file or standard input, renders it and writes the result
to standard output or a file.

Examples
--------
Render a post to HTML:
    $ bbhtml post.bbcode

Write a standalone HTML page:
    $ bbhtml post.bbcode --standalone -o post.html

Normalize markup to canonical BBCode:
    $ cat post.bbcode | bbhtml - --to bbcode

Pretty-print with syntax highlighting:
    $ bbhtml post.bbcode --rich
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Optional, TypeVar

from bbhtml import __version__
from bbhtml.api import bbcode_to_html, build_default_registry, parse, to_bbcode
from bbhtml.constants import (
    DEFAULT_OUTPUT_FORMAT,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
)
from bbhtml.exceptions import FileError, InputFileNotFoundError
from bbhtml.logging_utils import configure_logging
from bbhtml.options import BBCodeParserOptions, HtmlRendererOptions
from bbhtml.options.base import cli_arguments
from bbhtml.utils.encoding import read_text_with_encoding_detection
from bbhtml.utils.io_utils import write_content

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"

OptionsT = TypeVar("OptionsT")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bbhtml",
        description="Render BBCode markup to safe HTML.",
    )
    parser.add_argument("input", help="Input file path, or '-' to read standard input")
    parser.add_argument("-o", "--out", help="Output file path (default: standard output)")
    parser.add_argument(
        "--to",
        choices=["html", "bbcode"],
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format (default: %(default)s)",
    )
    for title, options_class in (("parser options", BBCodeParserOptions), ("HTML options", HtmlRendererOptions)):
        group = parser.add_argument_group(title)
        for flag, kwargs in cli_arguments(options_class):
            group.add_argument(flag, **kwargs)

    parser.add_argument("--rich", action="store_true", help="Pretty-print output with syntax highlighting")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(options_class: type[OptionsT], parsed: argparse.Namespace) -> OptionsT:
    """Build an options instance from the parsed arguments of its fields."""
    values = {option_field.name: getattr(parsed, option_field.name) for option_field in fields(options_class)}
    return options_class(**values)


def read_input(source: str) -> str:
    """Read and decode the input markup.

    Parameters
    ----------
    source : str
        File path, or ``-`` for standard input

    Returns
    -------
    str
        Decoded markup

    Raises
    ------
    InputFileNotFoundError
        If the path does not exist
    FileError
        If the file cannot be read

    """
    if source == STDIN_MARKER:
        return read_text_with_encoding_detection(sys.stdin.buffer.read())

    path = Path(source)
    if not path.exists():
        raise InputFileNotFoundError(str(path))
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileError(f"Could not read {path}: {e}", file_path=str(path), original_error=e) from e
    return read_text_with_encoding_detection(data)


def print_rich(text: str, output_format: str) -> None:
    """Print output with rich syntax highlighting."""
    from rich.console import Console
    from rich.syntax import Syntax

    lexer = "html" if output_format == "html" else "text"
    Console().print(Syntax(text, lexer, word_wrap=True))


def main(args: Optional[list[str]] = None) -> int:
    """Execute the command-line front end.

    Returns
    -------
    int
        Process exit code: 0 on success, 2 on an input or output file error

    """
    parser = create_parser()
    parsed = parser.parse_args(args)
    configure_logging(parsed.log_level, log_file=parsed.log_file, trace_mode=parsed.trace)

    try:
        parser_options = options_from_args(BBCodeParserOptions, parsed)
    except ValueError as e:
        parser.error(str(e))

    try:
        text = read_input(parsed.input)
    except FileError as e:
        logger.error(e.message)
        return EXIT_FILE_ERROR

    registry = build_default_registry()
    if parsed.to == "bbcode":
        result = to_bbcode(parse(text, registry, parser_options), registry)
    else:
        renderer_options = options_from_args(HtmlRendererOptions, parsed)
        result = bbcode_to_html(text, registry, parser_options, renderer_options)

    if parsed.out:
        try:
            write_content(result, parsed.out)
        except OSError as e:
            logger.error("Could not write %s: %s", parsed.out, e)
            return EXIT_FILE_ERROR
        logger.info("Wrote %s", parsed.out)
    elif parsed.rich:
        print_rich(result, parsed.to)
    else:
        sys.stdout.write(result)
        if not result.endswith("\n"):
            sys.stdout.write("\n")

    return EXIT_SUCCESS
