#!/usr/bin/env python3
"""
Name: find
Description: search directory trees for entries by name and type
License: perl
"""

import sys
import os
import re
import argparse
from enum import Enum

PROGRAM_NAME = "find"

class EntryType(Enum):
    DIR = 'd'
    FILE = 'f'
    LINK = 'l'

    def matches(self, path) -> bool:
        if self is EntryType.DIR:
            return os.path.isdir(path)
        if self is EntryType.FILE:
            return os.path.isfile(path)
        return os.path.islink(path)

def walk(path):
    """
    Yields (path, error) pairs for `path` and everything below it,
    depth first, each directory before its contents, siblings sorted by
    name. Symbolic links are listed but never followed.
    """
    try:
        os.lstat(path)
    except OSError as e:
        yield None, f"{path}: {e.strerror}"
        return
    yield path, None

    if not os.path.isdir(path) or os.path.islink(path):
        return
    try:
        entries = sorted(os.scandir(path), key=lambda entry: entry.name)
    except OSError as e:
        yield None, f"{path}: {e.strerror}"
        return
    for entry in entries:
        yield from walk(entry.path)

def entry_matches(path, names, entry_types) -> bool:
    """
    An entry is kept when its basename matches any of the name patterns and
    its type any of the entry types. An empty criterion matches everything.
    """
    basename = os.path.basename(path)
    if names and not any(regex.search(basename) for regex in names):
        return False
    if entry_types and not any(t.matches(path) for t in entry_types):
        return False
    return True

def find_entries(path, names=(), entry_types=()):
    """Yields (path, error) for the matching entries under `path`; errors always pass."""
    for found, error in walk(path):
        if error or entry_matches(found, names, entry_types):
            yield found, error

def name_pattern(value):
    """argparse type for -n: a compiled regular expression."""
    try:
        return re.compile(value)
    except re.error as e:
        raise argparse.ArgumentTypeError(f"invalid regular expression '{value}': {e}")

def main(argv=None):
    """Parses arguments and prints every matching entry."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Search directory trees for entries by name and type.",
        usage="%(prog)s [-n name] [-t {d,f,l}] [path ...]"
    )
    parser.add_argument('-n', '--name', dest='names', type=name_pattern,
                        action='append', default=[], help='Name pattern(s), as regular expressions.')
    parser.add_argument('-t', '--type', dest='types', choices=['d', 'f', 'l'],
                        action='append', default=[], help='Entry type(s): d, f or l.')
    parser.add_argument('paths', nargs='*', default=['.'], help='Search paths (default: .).')

    args = parser.parse_args(argv)
    entry_types = [EntryType(t) for t in args.types]
    exit_status = 0

    for path in args.paths:
        for found, error in find_entries(path, args.names, entry_types):
            if error:
                print(f"{PROGRAM_NAME}: {error}", file=sys.stderr)
                exit_status = 1
            else:
                print(found)

    sys.exit(exit_status)

if __name__ == "__main__":
    main()
