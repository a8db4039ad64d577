import logging
import sys

from . import __version__
from .interpreter import Interpreter, Outcome

try:
    import readline
except ImportError:  # no line editing on this platform
    readline = None

logger = logging.getLogger(__name__)

PROMPT = "lispy> "
BANNER = f"Lispy version {__version__}\nPress CTRL+C to exit\n"
EXIT_COMMANDS = ("exit", "quit")
COMMENT = ";"


class LineReader:
    """Prompted line input with a history that lives as long as the ``with`` block."""

    def __init__(self, prompt=PROMPT):
        self.prompt = prompt

    def __enter__(self):
        if readline is not None:
            readline.clear_history()
            readline.set_auto_history(False)
        return self

    def __exit__(self, exc_type, exc, tb):
        if readline is not None:
            readline.clear_history()
            readline.set_auto_history(True)
        return False

    def read(self) -> str:
        return input(self.prompt)

    def remember(self, line: str) -> None:
        if readline is not None:
            readline.add_history(line)


def print_outcome(outcome: Outcome) -> None:
    if outcome.syntax_error is not None:
        print(outcome.syntax_error, file=sys.stderr)
    else:
        print(outcome.render())


def run_repl(interpreter: Interpreter, reader: LineReader) -> int:
    print(BANNER)
    logger.info("session started")
    while True:
        try:
            line = reader.read()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        line = line.strip()
        if not line:
            continue
        reader.remember(line)
        if line.lower() in EXIT_COMMANDS:
            break

        print_outcome(interpreter.run_line(line))

    logger.info("session ended")
    return 0


def run_script(interpreter: Interpreter, filename: str) -> int:
    """Run each line of ``filename`` as its own program. Returns the number of failed lines."""
    logger.info("running script %s", filename)
    failures = 0
    with open(filename, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith(COMMENT):
                continue
            print(f"{PROMPT}{line}")
            outcome = interpreter.run_line(line)
            print_outcome(outcome)
            if not outcome.ok:
                failures += 1
    logger.info("finished script %s with %d failed line(s)", filename, failures)
    return failures
