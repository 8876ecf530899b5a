"""Command line calculator.

Solves the expressions given as arguments, or reads them from a ``calc>``
prompt if there are none. Set DEBUG in the environment (or pass --verbose) to
log the reverse polish form of each expression.
"""
import argparse
import logging
import os
import sys

from rpn import solve
from shunting_yard import ShuntingYardError, convert, format_rpn

DEBUG = bool(os.getenv("DEBUG", False))

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def run(expr, show_rpn=False):
    return format_rpn(convert(expr)) if show_rpn else solve(expr)


def repl(show_rpn=False):
    try:
        while True:
            expr = input("calc> ").strip()
            if not expr:
                continue
            try:
                print(run(expr, show_rpn))
            except ShuntingYardError as e:
                print(f"error: {e}", file=sys.stderr)
    except EOFError:
        print(file=sys.stderr)
    except KeyboardInterrupt:
        print("\ninterrupted", file=sys.stderr)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Evaluate arithmetic expressions (+ - * / ^ and parentheses)."
    )
    parser.add_argument("exprs", nargs="*", metavar="EXPR")
    parser.add_argument(
        "--rpn", action="store_true", help="print reverse polish notation, not the value"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or DEBUG else logging.WARNING,
        format=_LOG_FORMAT,
    )

    if not args.exprs:
        return repl(args.rpn)
    status = 0
    for expr in args.exprs:
        try:
            print(run(expr, args.rpn))
        except ShuntingYardError as e:
            print(f"error: {e}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
