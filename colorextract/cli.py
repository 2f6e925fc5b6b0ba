# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

"""
Command-line interface.

    colorextract style.css
    echo "color: #FF5733" | colorextract
    colorextract --format rgb --output clean file.txt
    colorextract --output svg --output-file palette.svg theme.css

Malformed color tokens are dropped silently. Unreadable inputs and
unwritable outputs are errors: they are reported on stderr and the process
exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from colorextract import __version__
from colorextract.core.convert import TargetFormat
from colorextract.core.extract import extract
from colorextract.runtime.serializers import OutputFormat, serialize

logger = logging.getLogger(__name__)

FILE_SEPARATOR = "\n---\n"


class InputReadError(Exception):
    """An input file could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Error reading file '{path}': {reason}")
        self.path = path


class OutputWriteError(Exception):
    """The output file could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Error writing to file '{path}': {reason}")
        self.path = path


class OutputSink:
    """
    Writes results to stdout or to a file.

    The output file is truncated on the first write of a run and appended
    to afterwards, so rerunning never accumulates stale results.
    """

    def __init__(self, path: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
        self.path = path
        self.stream = stream or sys.stdout
        self._written = False

    def write(self, text: str) -> None:
        if self.path is None:
            print(text, file=self.stream)
            return

        mode = "a" if self._written else "w"
        try:
            with open(self.path, mode, encoding="utf-8") as f:
                f.write(text + "\n")
        except OSError as e:
            raise OutputWriteError(self.path, e.strerror or str(e)) from e
        self._written = True


def read_input(path: str) -> str:
    """Read a UTF-8 text file."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise InputReadError(path, reason) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colorextract",
        description="Extract color values from text files and strings.",
        epilog="Supports hex, rgb(a), hsl(a) and oklch colors.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="files to extract colors from (reads stdin if none are given)",
    )
    parser.add_argument(
        "--output",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.STANDARD.value,
        help="output format (default: %(default)s)",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in TargetFormat],
        default=None,
        metavar="FORMAT",
        help="convert colors to: " + ", ".join(f.value for f in TargetFormat),
    )
    parser.add_argument(
        "--output-file",
        metavar="PATH",
        default=None,
        help="save output to file instead of stdout",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log dropped candidates and conversion fallbacks",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(
    files: Sequence[str],
    *,
    output: OutputFormat = OutputFormat.STANDARD,
    target: Optional[TargetFormat] = None,
    sink: Optional[OutputSink] = None,
    stdin: Optional[TextIO] = None,
) -> None:
    """Extract, serialize and write results for each input."""
    sink = sink or OutputSink()

    if not files:
        text = (stdin or sys.stdin).read()
        sink.write(serialize(extract(text), "stdin", format=output, target=target))
        return

    for index, path in enumerate(files):
        text = read_input(path)
        colors = extract(text)
        logger.debug("Found %d color(s) in %s", len(colors), path)
        sink.write(serialize(colors, path, format=output, target=target))
        if index < len(files) - 1:
            sink.write(FILE_SEPARATOR)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[colorextract][%(levelname)s] %(message)s",
    )

    try:
        run(
            args.files,
            output=OutputFormat(args.output),
            target=TargetFormat(args.format) if args.format else None,
            sink=OutputSink(args.output_file),
        )
    except (InputReadError, OutputWriteError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
