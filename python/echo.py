#!/usr/bin/env python3
"""
Name: echo
Description: echo arguments
Author: Randy Yarger, randy.yarger@nextel.com (Original Perl Author)
License: perl

Prints the command line arguments separated by spaces. A newline is
printed at the end unless the '-n' option is given.
"""

import sys
import argparse

PROGRAM_NAME = "echo"

def format_text(words, omit_newline=False) -> str:
    """Joins the words with single spaces and adds the line ending."""
    return " ".join(words) + ("" if omit_newline else "\n")

def main(argv=None):
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, description="Echo arguments.")
    parser.add_argument('-n', dest='omit_newline', action='store_true', help='Do not print newline.')
    parser.add_argument('text', nargs='+', metavar='TEXT', help='Input text.')

    args = parser.parse_args(argv)
    print(format_text(args.text, args.omit_newline), end='')
    sys.exit(0)

if __name__ == "__main__":
    main()
