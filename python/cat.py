#!/usr/bin/env python3
"""
Name: cat
Description: concatenate and print files
Author: Abigail, perlpowertools@abigail.be (Original Perl Author)
License: perl
"""

import sys
import argparse

PROGRAM_NAME = "cat"

def number_lines(lines, number_all=False, number_nonblank=False):
    """
    Yields the lines of one file ready for printing, without their line
    terminators. With -n every line gets a number; with -b only non-empty
    lines are numbered (blank ones are passed through untouched).
    """
    line_number = 0
    for line in lines:
        line = line.rstrip('\n')
        if line.endswith('\r'):
            line = line[:-1]

        if number_nonblank:
            if line:
                line_number += 1
                yield f"{line_number:6d}\t{line}"
            else:
                yield line
        elif number_all:
            line_number += 1
            yield f"{line_number:6d}\t{line}"
        else:
            yield line

def main(argv=None):
    """Parses arguments and runs the cat logic."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Concatenate and print files.",
        usage="%(prog)s [-n | -b] [file ...]"
    )
    numbering = parser.add_mutually_exclusive_group()
    numbering.add_argument('-n', '--number', action='store_true', help='Number all output lines.')
    numbering.add_argument('-b', '--number-nonblank', action='store_true', help='Number non-empty output lines.')
    parser.add_argument('files', nargs='*', help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(argv)
    exit_status = 0

    # Numbering restarts with every file.
    for filename in args.files or ['-']:
        try:
            stream = sys.stdin if filename == '-' else open(filename, 'r', encoding='utf-8', errors='replace', newline='\n')
        except OSError as e:
            print(f"{PROGRAM_NAME}: {filename}: {e.strerror}", file=sys.stderr)
            exit_status = 1
            continue

        try:
            for line in number_lines(stream, args.number, args.number_nonblank):
                print(line)
        finally:
            if stream is not sys.stdin:
                stream.close()

    sys.exit(exit_status)

if __name__ == "__main__":
    main()
