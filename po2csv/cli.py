# -*- coding: utf-8 -*-
"""Command line entry point: po2csv <input.po> <output.csv>"""

import logging
import sys

from po2csv.common import ConversionError
from po2csv.convert import convert_file
from config import LOG_FORMAT, LOG_LEVEL

PROG = "po2csv"

USAGE = f"""{PROG} - Convert PO files to CSV
Usage: {PROG} <input.po> <output.csv>

Options:
  -h, --help    Display this help message"""


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)

    if argv and argv[0] in ("-h", "--help"):
        print(USAGE)
        return 0

    if len(argv) != 2:
        print("Error: Wrong number of arguments", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    input_path, output_path = argv
    try:
        count = convert_file(input_path, output_path)
    except ConversionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Successfully converted {input_path} to {output_path} "
          f"({count} entries)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
