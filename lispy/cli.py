import argparse
import sys

from . import __version__
from .interpreter import Interpreter
from .log import configure_logging
from .repl import LineReader, print_outcome, run_repl, run_script


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lispy", description="Lispy prefix-notation calculator")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("script", nargs="?", help="file to run line by line instead of starting the REPL")
    source.add_argument("-c", dest="expression", metavar="EXPR", help="evaluate one expression and exit")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    parser.add_argument("--debug-tree", action="store_true", help="log each parse tree at DEBUG level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.expression is not None:
        outcome = Interpreter(source="<string>", debug_tree=args.debug_tree).run_line(args.expression)
        print_outcome(outcome)
        return 0 if outcome.ok else 1

    if args.script:
        interpreter = Interpreter(source=args.script, debug_tree=args.debug_tree)
        try:
            failures = run_script(interpreter, args.script)
        except OSError as e:
            print(f"Error: cannot read '{args.script}': {e.strerror}", file=sys.stderr)
            return 2
        except UnicodeDecodeError as e:
            print(f"Error: cannot read '{args.script}': not valid UTF-8 ({e.reason} at byte {e.start})", file=sys.stderr)
            return 2
        return 1 if failures else 0

    with LineReader() as reader:
        return run_repl(Interpreter(debug_tree=args.debug_tree), reader)


if __name__ == "__main__":
    sys.exit(main())
