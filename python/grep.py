#!/usr/bin/env python3

"""
Name: grep
Description: search for regular expressions and print
Author: Tom Christiansen, tchrist@perl.com
Author: Greg Bacon, gbacon@itsc.uah.edu
Author: Paul Grassie
License: perl
"""

import sys
import os
import re
import stat
import argparse

# Constants
EX_MATCHED = 0
EX_NOMATCH = 1
EX_FAILURE = 2

PROGRAM_NAME = "grep"

def compile_pattern(pattern: str, insensitive=False):
    """Compiles the search pattern, raising ValueError with a readable message."""
    flags = re.IGNORECASE if insensitive else 0
    try:
        return re.compile(pattern, flags)
    except re.error:
        raise ValueError(f'Invalid pattern "{pattern}"') from None

def find_files(paths, recursive=False):
    """
    Expands the command-line paths into the list of inputs to search.
    Each entry is a (filename, error) pair; exactly one of the two is None.
    Directories are only descended into when `recursive` is set.
    """
    files = []
    for path in paths:
        if path == '-':
            files.append((path, None))
            continue

        try:
            mode = os.stat(path).st_mode
        except OSError as e:
            files.append((None, f"{path}: {e.strerror}"))
            continue

        if not stat.S_ISDIR(mode):
            files.append((path, None))
        elif recursive:
            def on_error(e, root=path):
                files.append((None, f"{root}: {e.strerror}"))
            for dirpath, _, filenames in os.walk(path, onerror=on_error):
                for name in filenames:
                    full = os.path.join(dirpath, name)
                    if os.path.isfile(full):
                        files.append((full, None))
        else:
            files.append((None, f"{path} is a directory"))

    return files

def find_lines(stream, pattern, invert_match=False):
    """Returns the lines (endings kept) whose match status differs from `invert_match`."""
    return [line for line in stream if bool(pattern.search(line)) != invert_match]

def main(argv=None):
    """Parses arguments and searches every input for the pattern."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Search for regular expressions and print matching lines.",
        usage="%(prog)s [-rcvi] pattern [file ...]"
    )
    parser.add_argument('-r', '--recursive', action='store_true', help='recursive on directories')
    parser.add_argument('-c', '--count', action='store_true', help='give count of lines matching')
    parser.add_argument('-v', '--invert-match', action='store_true', help='invert search sense')
    parser.add_argument('-i', '--insensitive', action='store_true', help='case insensitive')
    parser.add_argument('pattern', help='pattern')
    parser.add_argument('files', nargs='*', help='Files to search. Reads from stdin if none are given.')

    args = parser.parse_args(argv)

    try:
        pattern = compile_pattern(args.pattern, args.insensitive)
    except ValueError as e:
        print(f"{PROGRAM_NAME}: {e}", file=sys.stderr)
        sys.exit(EX_FAILURE)

    entries = find_files(args.files or ['-'], args.recursive)
    show_filename = len(entries) > 1
    errors = 0
    matched = False

    for filename, error in entries:
        if error:
            print(f"{PROGRAM_NAME}: {error}", file=sys.stderr)
            errors += 1
            continue

        try:
            stream = sys.stdin if filename == '-' else open(filename, 'r', encoding='utf-8', errors='replace', newline='\n')
        except OSError as e:
            print(f"{PROGRAM_NAME}: {filename}: {e.strerror}", file=sys.stderr)
            errors += 1
            continue

        try:
            matches = find_lines(stream, pattern, args.invert_match)
        finally:
            if stream is not sys.stdin:
                stream.close()

        matched = matched or bool(matches)
        prefix = f"{filename}:" if show_filename else ""
        if args.count:
            print(f"{prefix}{len(matches)}")
        else:
            for line in matches:
                print(f"{prefix}{line}", end='')

    if errors:
        sys.exit(EX_FAILURE)
    sys.exit(EX_MATCHED if matched else EX_NOMATCH)

if __name__ == "__main__":
    main()
