import logging
from dataclasses import dataclass
from typing import Optional

from lark import Lark
from lark.exceptions import UnexpectedInput

from .evaluator import evaluate
from .grammar import format_syntax_error, load_parser, parse, pretty
from .nodes import to_ast
from .values import Err, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """What one input line produced: a result, or a syntax error message."""
    text: str
    result: Optional[Result] = None
    syntax_error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.syntax_error is None and not isinstance(self.result, Err)

    def render(self) -> str:
        if self.syntax_error is not None:
            return self.syntax_error
        return self.result.render()


class Interpreter:
    def __init__(self, parser: Optional[Lark] = None, source: str = "<stdin>", debug_tree: bool = False):
        self.parser = parser or load_parser()
        self.source = source
        self.debug_tree = debug_tree

    def evaluate(self, text: str) -> Result:
        """Parse and evaluate ``text``. Syntax errors propagate as lark exceptions."""
        tree = parse(self.parser, text)
        if self.debug_tree:
            logger.debug("parse tree:\n%s", pretty(tree))
        return evaluate(to_ast(tree))

    def run_line(self, text: str) -> Outcome:
        logger.debug("input %r", text)
        try:
            result = self.evaluate(text)
        except UnexpectedInput as e:
            return Outcome(text, syntax_error=format_syntax_error(text, e, self.source))
        return Outcome(text, result=result)
