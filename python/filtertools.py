#!/usr/bin/env python3
"""
Name: filtertools
Description: a program launcher for the text filter tools
License: perl
"""

import sys
import argparse
import importlib

__version__ = "0.1.0"

# Using a set for fast 'in' lookups.
TOOLS = {
    'cat', 'cut', 'echo', 'find', 'grep', 'head', 'uniq', 'wc',
}

def run_tool(tool, tool_args):
    """Imports the tool's module and runs its main() with the given arguments."""
    module = importlib.import_module(tool)
    module.main(list(tool_args))

def main(argv=None):
    """Parses arguments and launches the specified tool."""
    parser = argparse.ArgumentParser(
        prog="filtertools",
        description="A program launcher for the text filter tools.",
        usage="%(prog)s [-l | --list] [-V | --version] [-h | --help] tool [arg ...]"
    )
    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument(
        '-l', '--list',
        action='store_true',
        help='list available tools'
    )
    # This collects the tool name and all subsequent arguments.
    parser.add_argument(
        'command',
        nargs=argparse.REMAINDER,
        help='The tool to run followed by its arguments.'
    )

    args = parser.parse_args(argv)

    # If --list is used, print tools and exit.
    if args.list:
        print("\n".join(sorted(TOOLS)))
        sys.exit(0)

    # If no tool is specified, show the help message.
    if not args.command:
        parser.print_help()
        sys.exit(1)

    tool, tool_args = args.command[0], args.command[1:]

    # Validate that the requested tool is in our list.
    if tool not in TOOLS:
        print(f"filtertools: unknown tool '{tool}' (try --list)", file=sys.stderr)
        sys.exit(1)

    run_tool(tool, tool_args)

if __name__ == "__main__":
    main()
