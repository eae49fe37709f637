"""
bantam-parse: check Bantam Java source files for syntax errors.

Each file is parsed on its own; diagnostics are printed in source order,
followed by a one-line summary. Exit status is 0 only when every file
parsed cleanly.
"""

import sys
import json
import logging
import argparse
from typing import List, Optional

from .lexer.errors import CompilationError, ErrorHandler, ErrorKind
from .parser.parser import Parser
from .logging_config import setup_logging


def _count(number: int, noun: str) -> str:
    if number == 1:
        return f"1 {noun} error was found."
    return f"{number} {noun} errors were found."


def summarize(syntax_errors: int, lexical_errors: int = 0) -> str:
    """One line per kind of error found, or the success message."""
    if syntax_errors == 0 and lexical_errors == 0:
        return "Parsing was successful!"

    lines = []
    if lexical_errors:
        lines.append(_count(lexical_errors, "lexical"))
    if syntax_errors:
        lines.append(_count(syntax_errors, "syntax"))
    return "\n".join(lines)


def check_file(path: str, dump_ast: bool = False) -> bool:
    """Parse one file and print its report. Returns True if it parsed cleanly."""
    handler = ErrorHandler()
    try:
        program = Parser(handler).parse(path)
    except CompilationError as e:
        print(f"ERROR: {e}")
        return False

    for diagnostic in handler.errors:
        print(diagnostic)

    print(summarize(
        len(handler.errors_of_kind(ErrorKind.PARSE_ERROR)),
        len(handler.errors_of_kind(ErrorKind.LEX_ERROR))
    ))

    if dump_ast and not handler.has_errors():
        print(json.dumps(program.to_dict(), indent=2))

    return not handler.has_errors()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for bantam-parse"""

    parser = argparse.ArgumentParser(
        prog="bantam-parse",
        description="Parse Bantam Java source files and report syntax errors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    bantam-parse Main.btm                 # Check one file
    bantam-parse *.btm --verbose          # Check several files with debug logging
    bantam-parse Main.btm --dump-ast      # Print the AST as JSON
        """
    )

    parser.add_argument('files', nargs='+', metavar='FILE',
                        help='Bantam Java source files to parse')
    parser.add_argument('--dump-ast', action='store_true',
                        help='Print the AST of each cleanly parsed file as JSON')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--log-file',
                        help='Also write log output to this file')

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    all_clean = True
    for path in args.files:
        if len(args.files) > 1:
            print(f"{path}:")
        if not check_file(path, args.dump_ast):
            all_clean = False

    return 0 if all_clean else 1


if __name__ == "__main__":
    sys.exit(main())
