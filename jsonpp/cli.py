# Copyright © 2009/2023 Andrey Vlasovskikh
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this
# software and associated documentation files (the "Software"), to deal in the Software
# without restriction, including without limitation the rights to use, copy, modify,
# merge, publish, distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be included in all copies
# or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED,
# INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A
# PARTICULAR PURPOSE AND NON-INFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""Command-line interface: read a JSON document and print it indented.

    jsonpp [FILE] [--indent N] [--max-depth N] [--ascii] [--debug]

Without FILE, or with FILE `-`, the document is read from the standard input. On a
syntax error nothing is written to the standard output, a diagnostic goes to the
standard error and the exit status is 1.
"""

import argparse
import logging
import sys
from typing import List, Optional

import funcparserlib.parser

from jsonpp.errors import ParseError
from jsonpp.formatter import dumps
from jsonpp.grammar import DEFAULT_MAX_DEPTH, loads

ENCODING = "UTF-8"

log = logging.getLogger("jsonpp")


def read_text(path: str) -> str:
    if path == "-":
        text = sys.stdin.read()
    else:
        with open(path, encoding=ENCODING) as f:
            text = f.read()
    return text[1:] if text.startswith("\ufeff") else text


def make_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jsonpp", description="Pretty-print a JSON document."
    )
    p.add_argument(
        "file",
        nargs="?",
        default="-",
        help="JSON file to read (default: standard input)",
    )
    p.add_argument(
        "-i",
        "--indent",
        type=int,
        default=2,
        metavar="N",
        help="spaces per indentation level (default: 2)",
    )
    p.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help="maximum nesting of arrays and objects (default: %d)" % DEFAULT_MAX_DEPTH,
    )
    p.add_argument(
        "--ascii",
        action="store_true",
        help="escape all non-ASCII characters as \\uXXXX",
    )
    p.add_argument("--debug", action="store_true", help="log parsing steps")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    arg_parser = make_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.indent < 0:
        arg_parser.error("argument -i/--indent: must not be negative")
    if args.max_depth < 0:
        arg_parser.error("argument --max-depth: must not be negative")
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
        funcparserlib.parser.debug = True

    try:
        text = read_text(args.file)
    except (OSError, UnicodeDecodeError) as e:
        arg_parser.exit(2, "%s: cannot read %s: %s\n" % (arg_parser.prog, args.file, e))
    log.debug("read %d characters from %s" % (len(text), args.file))

    try:
        tree = loads(text, args.max_depth)
    except ParseError as e:
        print("syntax error: %s" % e, file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(dumps(tree, args.indent, args.ascii))


if __name__ == "__main__":
    main()
