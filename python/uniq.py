#!/usr/bin/env python3
"""
Name: uniq
Description: report or filter out repeated lines in a file
Author: Jonathan Feinberg, jdf@pobox.com (Original Perl Author)
License: perl
"""

import sys
import argparse
import itertools

PROGRAM_NAME = "uniq"

def uniq_lines(lines):
    """
    Groups adjacent lines that differ only in trailing whitespace
    (line endings included) and yields (count, first_line) per group.
    """
    # itertools.groupby is the perfect tool for processing consecutive identical items.
    for _, group in itertools.groupby(lines, key=lambda line: line.rstrip()):
        group_lines = list(group)
        yield len(group_lines), group_lines[0]

def format_group(count: int, line: str, show_count=False) -> str:
    if show_count:
        return f"{count:4d} {line}"
    return line

def main(argv=None):
    """Parses arguments and runs the uniq logic."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Report or filter out repeated adjacent lines in a file.",
        usage="%(prog)s [-c] [input_file [output_file]]"
    )
    parser.add_argument('-c', '--count', action='store_true', help='Precede each line with its repetition count.')
    parser.add_argument('input_file', nargs='?', default='-', help="Input file (default: stdin).")
    parser.add_argument('output_file', nargs='?', help="Output file (default: stdout).")

    args = parser.parse_args(argv)

    # --- Setup I/O Streams ---
    try:
        input_stream = open(args.input_file, 'r', encoding='utf-8', newline='\n') if args.input_file != '-' else sys.stdin
    except OSError as e:
        print(f"{PROGRAM_NAME}: {args.input_file}: {e.strerror}", file=sys.stderr)
        sys.exit(1)
    try:
        output_stream = open(args.output_file, 'w', encoding='utf-8', newline='') if args.output_file else sys.stdout
    except OSError as e:
        print(f"{PROGRAM_NAME}: {args.output_file}: {e.strerror}", file=sys.stderr)
        sys.exit(1)

    try:
        for count, line in uniq_lines(input_stream):
            output_stream.write(format_group(count, line, args.count))
    except OSError as e:
        print(f"{PROGRAM_NAME}: I/O error: {e.strerror}", file=sys.stderr)
        sys.exit(1)
    finally:
        if input_stream is not sys.stdin:
            input_stream.close()
        if output_stream is not sys.stdout:
            output_stream.close()

    sys.exit(0)

if __name__ == "__main__":
    main()
