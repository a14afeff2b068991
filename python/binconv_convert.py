#!/usr/bin/env python3
"""
binconv CLI Converter

Usage:
    binconv_convert.py 'hi!'
    binconv_convert.py '1101000 1101001!'
    binconv_convert.py -i input.txt -o output.txt
    binconv_convert.py --stream < inputs.txt > outputs.txt
"""

import argparse
import logging
import sys
from typing import List, Optional

from binconv import ConversionError, convert_input

logger = logging.getLogger('binconv')


def write_result(result: str, output_path: Optional[str]) -> None:
    """Write result to output_path, or to stdout when no path is given."""
    if output_path:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(result + '\n')
        logger.info("Wrote %d chars to %s", len(result), output_path)
    else:
        print(result)


def convert_file(input_path: str, output_path: Optional[str]) -> None:
    """Convert the whole content of a file as one input."""

    with open(input_path, 'r', encoding='utf-8') as f:
        content = f.read()

    # A trailing newline from the editor is not part of the input
    write_result(convert_input(content.rstrip('\r\n')), output_path)


def convert_stream() -> int:
    """Convert each non-blank stdin line, one result per output line."""
    failures = 0

    for line in sys.stdin:
        line = line.rstrip('\r\n')
        if not line.strip():
            continue
        try:
            print(convert_input(line))
        except ConversionError as e:
            failures += 1
            print(f"Warning: skipping {line!r}: {e}", file=sys.stderr)

    return failures


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description='Convert text to binary or binary to text (input must end with "!")',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  binconv_convert.py 'hi!'
  binconv_convert.py '1101000 1101001!'
  binconv_convert.py -i message.txt -o message.bin.txt
  cat inputs.txt | binconv_convert.py --stream > outputs.txt
"""
    )

    parser.add_argument('text', nargs='*', help='Text or binary to convert')
    parser.add_argument('-i', '--input', help='Read the input from a file')
    parser.add_argument('-o', '--output', help='Write the result to a file')
    parser.add_argument('--stream', action='store_true',
                        help='Stream mode: convert each line of stdin')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    if args.stream and args.output:
        parser.error('--output cannot be used with --stream')

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        if args.stream:
            if convert_stream():
                sys.exit(1)
        elif args.input:
            convert_file(args.input, args.output)
        elif args.text:
            write_result(convert_input(' '.join(args.text)), args.output)
        else:
            parser.print_help()
            sys.exit(1)
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
