"""Command line entry point: run a source file and print each result."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence

from mclisp import __version__
from mclisp.config import Settings
from mclisp.interpreter import Interpreter
from mclisp.printer import load_options_from_json, pprint

EXIT_OK = 0
EXIT_CANNOT_OPEN = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mclisp",
        description="Evaluate a McCarthy-style Lisp source file, printing every top-level result.",
    )
    parser.add_argument("file", help="source file to run, or - for standard input")
    parser.add_argument(
        "--extended",
        action="store_true",
        help="accept 'x quote sugar, \"string\" literals and dotted pairs",
    )
    parser.add_argument(
        "--lenient-arity",
        action="store_true",
        help="bind missing lambda arguments to #undefined and ignore extras",
    )
    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=None,
        help="minimum host recursion limit (default from MCLISP_RECURSION_LIMIT)",
    )
    parser.add_argument("--color", action="store_true", help="colorize printed results")
    parser.add_argument(
        "--printer-config",
        metavar="JSON",
        default=None,
        help='printer options as a JSON object, e.g. \'{"max_line_length": 60}\'',
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s", stream=sys.stderr)

    printer_options: dict = {}
    if args.printer_config:
        try:
            printer_options = load_options_from_json(args.printer_config)
        except ValueError as ex:
            parser.error(f"--printer-config: {ex}")
    if args.color:
        printer_options["color"] = True

    settings = Settings.from_env()
    if args.extended:
        settings = replace(settings, extended_syntax=True)
    if args.lenient_arity:
        settings = replace(settings, strict_arity=False)
    if args.recursion_limit is not None:
        settings = replace(settings, recursion_limit=args.recursion_limit)

    interp = Interpreter(settings=settings)

    if args.file == "-":
        source = sys.stdin.buffer
    else:
        try:
            source = open(args.file, "rb")
        except OSError as ex:
            logging.getLogger("mclisp").error("cannot open %s: %s", args.file, ex.strerror or ex)
            return EXIT_CANNOT_OPEN

    try:
        for _, result in interp.run(source):
            pprint(result, sys.stdout, printer_options)
    finally:
        if source is not sys.stdin.buffer:
            source.close()
    return EXIT_OK
