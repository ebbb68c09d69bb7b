#!/usr/bin/env python3
"""
Name: head
Description: print the first lines of a file
Author: Abigail, perlpowertools@abigail.be (Original Perl Author)
License: perl
"""

import sys
import argparse
import itertools

PROGRAM_NAME = "head"

def parse_positive_int(value: str) -> int:
    """Returns `value` as an int, raising ValueError unless it is > 0."""
    if not value.isascii() or not value.isdigit() or int(value) == 0:
        raise ValueError(value)
    return int(value)

def head_lines(stream, count: int) -> str:
    """
    Reads at most `count` lines from a binary stream. Line endings are
    kept as they were, including a final line with no newline.
    """
    lines = itertools.islice(stream, count)
    return b"".join(lines).decode('utf-8', errors='replace')

def head_bytes(stream, count: int) -> str:
    """Reads at most `count` bytes; a split character becomes U+FFFD."""
    return stream.read(count).decode('utf-8', errors='replace')

def main(argv=None):
    """Parses arguments and prints the head of each file or stdin."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Print the first lines of a file.",
        usage="%(prog)s [-n count | -c bytes] [file ...]"
    )
    amount = parser.add_mutually_exclusive_group()
    amount.add_argument('-n', '--lines', default='10', metavar='LINES',
                        help='The number of lines to print (default: 10).')
    amount.add_argument('-c', '--bytes', metavar='BYTES', help='The number of bytes to print.')
    parser.add_argument('files', nargs='*', help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(argv)

    # --- Validate arguments ---
    try:
        lines = parse_positive_int(args.lines)
    except ValueError:
        print(f"{PROGRAM_NAME}: invalid value '{args.lines}' for '--lines <LINES>'", file=sys.stderr)
        sys.exit(1)
    byte_count = None
    if args.bytes is not None:
        try:
            byte_count = parse_positive_int(args.bytes)
        except ValueError:
            print(f"{PROGRAM_NAME}: invalid value '{args.bytes}' for '--bytes <BYTES>'", file=sys.stderr)
            sys.exit(1)

    # --- Process Files or Stdin ---
    files = args.files or ['-']
    is_multi_file = len(files) > 1
    exit_status = 0

    for i, filename in enumerate(files):
        try:
            stream = sys.stdin.buffer if filename == '-' else open(filename, 'rb')
        except OSError as e:
            print(f"{PROGRAM_NAME}: {filename}: {e.strerror}", file=sys.stderr)
            exit_status = 1
            continue

        try:
            if is_multi_file:
                if i > 0:
                    print()
                print(f"==> {filename} <==")
            if byte_count is not None:
                print(head_bytes(stream, byte_count), end='')
            else:
                print(head_lines(stream, lines), end='')
        finally:
            if filename != '-':
                stream.close()

    sys.exit(exit_status)

if __name__ == "__main__":
    main()
