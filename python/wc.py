#!/usr/bin/env python3
"""
Name: wc
Description: line, word, character, and byte counter
Author: Peter Prymmer, pvhp@best.com (Original Perl Author)
License: perl
"""

import sys
import argparse

PROGRAM_NAME = "wc"

class FileInfo:
    """Counts gathered for one input (or the running total)."""
    def __init__(self, num_lines=0, num_words=0, num_bytes=0, num_chars=0):
        self.num_lines = num_lines
        self.num_words = num_words
        self.num_bytes = num_bytes
        self.num_chars = num_chars

    def add(self, other):
        self.num_lines += other.num_lines
        self.num_words += other.num_words
        self.num_bytes += other.num_bytes
        self.num_chars += other.num_chars

    def __eq__(self, other):
        if not isinstance(other, FileInfo):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        return (f"FileInfo(lines={self.num_lines}, words={self.num_words}, "
                f"bytes={self.num_bytes}, chars={self.num_chars})")

def count(stream) -> FileInfo:
    """
    Counts a binary stream line by line. Bytes are counted as read;
    characters and words after decoding each line as UTF-8.
    """
    info = FileInfo()
    for byte_line in stream:
        line = byte_line.decode('utf-8', errors='replace')
        info.num_lines += 1
        info.num_words += len(line.split())
        info.num_bytes += len(byte_line)
        info.num_chars += len(line)
    return info

def format_info(info: FileInfo, args, filename="-") -> str:
    """
    Formats the counts into a single output string based on the active flags.
    Standard input is shown without a name.
    """
    output_parts = []
    if args.lines: output_parts.append(f"{info.num_lines:>8}")
    if args.words: output_parts.append(f"{info.num_words:>8}")
    if args.bytes: output_parts.append(f"{info.num_bytes:>8}")
    if args.chars: output_parts.append(f"{info.num_chars:>8}")

    if filename != "-":
        output_parts.append(f" {filename}")
    return "".join(output_parts)

def main(argv=None):
    """Parses arguments and orchestrates the counting process."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="A line, word, character, and byte counter.",
        usage="%(prog)s [-l] [-w] [-c | -m] [file ...]"
    )
    parser.add_argument('-l', '--lines', action='store_true', help='Show line count.')
    parser.add_argument('-w', '--words', action='store_true', help='Show word count.')
    size = parser.add_mutually_exclusive_group()
    size.add_argument('-c', '--bytes', action='store_true', help='Show byte count.')
    size.add_argument('-m', '--chars', action='store_true', help='Show character count.')
    parser.add_argument('files', nargs='*', help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(argv)

    # Default is -lwc if no flags are specified.
    if not any([args.lines, args.words, args.bytes, args.chars]):
        args.lines = args.words = args.bytes = True

    # --- Process Files ---
    files = args.files or ['-']
    total_info = FileInfo()
    exit_status = 0

    for filepath in files:
        try:
            stream = sys.stdin.buffer if filepath == '-' else open(filepath, 'rb')
        except OSError as e:
            print(f"{PROGRAM_NAME}: {filepath}: {e.strerror}", file=sys.stderr)
            exit_status = 1
            continue

        try:
            file_info = count(stream)
        except OSError as e:
            print(f"{PROGRAM_NAME}: {filepath}: {e.strerror}", file=sys.stderr)
            exit_status = 1
            continue
        finally:
            if filepath != '-':
                stream.close()

        print(format_info(file_info, args, filepath))
        total_info.add(file_info)

    # If more than one file was named, print the total.
    if len(files) > 1:
        print(format_info(total_info, args, "total"))

    sys.exit(exit_status)

if __name__ == "__main__":
    main()
