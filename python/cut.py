#!/usr/bin/env python3
"""
Name: cut
Description: select portions of each line of a file
Author: Rich Lafferty, rich@alcor.concordia.ca (Original Perl Author)
License: perl
"""

import sys
import argparse
import csv
from enum import Enum

PROGRAM_NAME = "cut"

class CutError(Exception):
    """Base class for every error that ends or degrades a cut run."""

class ConfigError(CutError):
    """Bad, missing or conflicting command-line configuration."""

class ParseError(CutError, ValueError):
    """A position list that could not be parsed."""

class IllegalToken(ParseError):
    def __init__(self, token):
        self.token = token
        super().__init__(f'illegal list value: "{token}"')

class RangeOrder(ParseError):
    def __init__(self, first, second):
        self.first = first
        self.second = second
        super().__init__(
            f"First number in range ({first}) must be lower than second number ({second})"
        )

class FileOpenError(CutError):
    """An input path that could not be opened. The run skips it and carries on."""
    def __init__(self, filename, error):
        self.filename = filename
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(f"{filename}: {reason}")

class RecordError(CutError):
    """A malformed record. Ends the whole run."""
    def __init__(self, filename, reason):
        self.filename = filename
        self.reason = reason
        super().__init__(f"{filename}: {reason}")

class Extract(Enum):
    FIELDS = "fields"
    BYTES = "bytes"
    CHARS = "chars"

class Selector:
    """The active extraction mode together with its parsed position list."""
    def __init__(self, mode: Extract, positions: tuple):
        self.mode = mode
        self.positions = positions

    def __eq__(self, other):
        if not isinstance(other, Selector):
            return NotImplemented
        return (self.mode, self.positions) == (other.mode, other.positions)

    def __repr__(self):
        return f"Selector({self.mode.name}, {list(self.positions)!r})"

# --- Position list parsing ---

def _parse_index(text: str) -> int:
    """
    Converts one 1-based list value into a 0-based index.
    Raises IllegalToken carrying `text` when it is not a positive integer.
    """
    # str.isdigit() accepts non-ASCII digits, which int() would then take.
    if not text or not text.isascii() or not text.isdigit():
        raise IllegalToken(text)
    value = int(text)
    if value < 1:
        raise IllegalToken(text)
    return value - 1

def parse_pos(list_str: str) -> tuple:
    """
    Parses a cut-style list string (e.g., "1,7,3-5") into a tuple of
    half-open ranges, in the order they were written.

    "N" selects the single position N; "N-M" selects N through M inclusive
    and requires N < M. Positions are numbered from 1. Ranges are never
    sorted, merged or de-duplicated. The first bad value aborts the parse.
    """
    positions = []

    for part in list_str.split(','):
        # A sign is never allowed, not even inside a range ("1-+2").
        if '+' in part:
            raise IllegalToken(part)

        if '-' not in part:
            index = _parse_index(part)
            positions.append(range(index, index + 1))
            continue

        pieces = part.split('-')
        if len(pieces) != 2 or not all(p.isascii() and p.isdigit() for p in pieces):
            raise IllegalToken(part)

        start = _parse_index(pieces[0])
        end = _parse_index(pieces[1])
        if start >= end:
            raise RangeOrder(start + 1, end + 1)
        positions.append(range(start, end + 1))

    return tuple(positions)

def build_selector(field_list=None, byte_list=None, char_list=None) -> Selector:
    """
    Builds the selector for a run from the three mutually exclusive list
    options. Exactly one of them must be given.
    """
    given = [(mode, text) for mode, text in (
        (Extract.FIELDS, field_list),
        (Extract.BYTES, byte_list),
        (Extract.CHARS, char_list),
    ) if text is not None]

    if not given:
        raise ConfigError(
            "the following required arguments were not provided:\n"
            "  <--fields <FIELDS>|--bytes <BYTES>|--chars <CHARS>>"
        )
    if len(given) > 1:
        names = ", ".join(f"--{mode.value}" for mode, _ in given)
        raise ConfigError(f"only one of --fields, --bytes or --chars may be given (got {names})")

    mode, text = given[0]
    return Selector(mode, parse_pos(text))

def check_delimiter(delim: str) -> str:
    """Returns the delimiter if it is exactly one byte long."""
    if len(delim.encode('utf-8')) != 1:
        raise ConfigError(f'--delim "{delim}" must be a single byte')
    return delim

# --- Extraction ---

def extract_bytes(line: bytes, byte_pos) -> str:
    """
    Collects the selected bytes of a line and decodes them. A selection that
    cuts through a multi-byte character leaves a U+FFFD marker behind.
    """
    selected = bytearray()
    for rng in byte_pos:
        for i in rng:
            if i < len(line):
                selected.append(line[i])
    return selected.decode('utf-8', errors='replace')

def extract_chars(line: str, char_pos) -> str:
    """Collects the selected characters (code points) of a line."""
    return "".join(line[i] for rng in char_pos for i in rng if i < len(line))

def extract_fields(record, field_pos) -> list:
    """Collects the selected fields of a record; missing fields are skipped."""
    return [record[i] for rng in field_pos for i in rng if i < len(record)]

# --- Driver ---

def _strip_eol(line):
    """Removes a trailing "\\n" and the "\\r" before it, if any."""
    eol, cr = ('\n', '\r') if isinstance(line, str) else (b'\n', b'\r')
    if line.endswith(eol):
        line = line[:-1]
        if line.endswith(cr):
            line = line[:-1]
    return line

def open_input(filename: str, mode: Extract):
    """
    Opens one input for the given mode. "-" is standard input.
    Raises FileOpenError when the path cannot be opened.
    """
    binary = mode is Extract.BYTES
    if filename == '-':
        return sys.stdin.buffer if binary else sys.stdin
    try:
        if binary:
            return open(filename, 'rb')
        # Only "\n" ends a line; the csv reader needs untranslated input.
        newline = '' if mode is Extract.FIELDS else '\n'
        return open(filename, 'r', encoding='utf-8', newline=newline)
    except OSError as e:
        raise FileOpenError(filename, e) from e

def cut_lines(stream, selector: Selector):
    """Prints the selected bytes or characters of every line in the stream."""
    if selector.mode is Extract.BYTES:
        extract = extract_bytes
    else:
        extract = extract_chars
    for line in stream:
        print(extract(_strip_eol(line), selector.positions))

def cut_fields(stream, selector: Selector, delimiter: str, filename: str = '-'):
    """
    Reads delimited records and writes the selected fields back out with the
    same delimiter. Every record must have as many fields as the first one.
    """
    reader = csv.reader(stream, delimiter=delimiter)
    writer = csv.writer(sys.stdout, delimiter=delimiter, lineterminator='\n')
    expected = None
    try:
        for record in reader:
            # Blank lines carry no record.
            if not record:
                continue
            if expected is None:
                expected = len(record)
            elif len(record) != expected:
                raise RecordError(
                    filename,
                    f"found record with {len(record)} fields, but the previous "
                    f"record has {expected} fields (line {reader.line_num})"
                )
            writer.writerow(extract_fields(record, selector.positions))
    except csv.Error as e:
        raise RecordError(filename, f"line {reader.line_num}: {e}") from e

def run(selector: Selector, files=None, delimiter: str = '\t') -> int:
    """
    Applies the selector to every input in turn and returns the exit status.
    Inputs that cannot be opened are reported and skipped. A malformed
    record raises RecordError and stops the run.
    """
    exit_status = 0

    for filename in files or ['-']:
        try:
            stream = open_input(filename, selector.mode)
        except FileOpenError as e:
            print(e, file=sys.stderr)
            exit_status = 1
            continue

        try:
            if selector.mode is Extract.FIELDS:
                cut_fields(stream, selector, delimiter, filename)
            else:
                cut_lines(stream, selector)
        except UnicodeDecodeError as e:
            raise RecordError(filename, f"stream did not contain valid UTF-8 ({e.reason})") from e
        finally:
            if filename != '-':
                stream.close()

    return exit_status

def main(argv=None):
    """Parses arguments, builds the selector and runs the extraction."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Select portions of each line of a file.",
        usage="%(prog)s [-b list | -c list | -f list] [-d delim] [file ...]"
    )
    # The modes are mutually exclusive; "none given" is reported by build_selector.
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument('-b', '--bytes', dest='byte_list', metavar='BYTES',
                            help='The list specifies byte positions.')
    mode_group.add_argument('-c', '--characters', '--chars', dest='char_list', metavar='CHARS',
                            help='The list specifies character positions.')
    mode_group.add_argument('-f', '--fields', dest='field_list', metavar='FIELDS',
                            help='The list specifies fields.')

    parser.add_argument('-d', '--delimiter', '--delim', dest='delimiter', default='\t',
                        help="Use DELIM instead of TAB for field delimiter.")
    parser.add_argument('files', nargs='*', metavar='file',
                        help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(argv)

    # Everything that can be wrong with the command line is caught here,
    # before any input is opened.
    try:
        delimiter = check_delimiter(args.delimiter)
        selector = build_selector(args.field_list, args.byte_list, args.char_list)
    except CutError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    try:
        exit_status = run(selector, args.files, delimiter)
    except RecordError as e:
        sys.stdout.flush()
        print(e, file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_status)

if __name__ == "__main__":
    main()
