import logging

from lark import Lark, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

logger = logging.getLogger(__name__)

GRAMMAR_FILE = "lispy.lark"
OPERATORS = ("+", "-", "*", "/", "%")

# lark terminal name -> what the user typed or should have typed
TERMINAL_NAMES = {
    "NUMBER": "number",
    "OPERATOR": "operator",
    "LPAR": "'('",
    "RPAR": "')'",
    "$END": "end of input",
    "<END-OF-FILE>": "end of input",
}
IGNORED_TERMINALS = {"WS_INLINE"}


def load_parser() -> Lark:
    """Compile the grammar shipped next to this module into an LALR parser."""
    parser = Lark.open(GRAMMAR_FILE, rel_to=__file__, start="program", parser="lalr")
    logger.debug("grammar %s loaded", GRAMMAR_FILE)
    return parser


def parse(parser: Lark, text: str) -> Tree:
    """Match the whole of ``text`` against ``program``.

    Raises a ``lark.exceptions.UnexpectedInput`` on any mismatch.
    """
    return parser.parse(text)


def _terminal(name: str) -> str:
    return TERMINAL_NAMES.get(name, name.lower())


def _expected(names) -> str:
    names = sorted(set(names or ()) - IGNORED_TERMINALS, key=lambda n: (_terminal(n) == "end of input", n))
    if not names:
        return "nothing"
    return " or ".join(_terminal(n) for n in names)


def _at_end(error: UnexpectedInput) -> bool:
    if isinstance(error, UnexpectedEOF):
        return True
    return isinstance(error, UnexpectedToken) and error.token.type == "$END"


def describe(error: UnexpectedInput) -> str:
    """One-line description of what went wrong, without position."""
    if _at_end(error):
        return f"unexpected end of input, expected {_expected(error.expected)}"
    if isinstance(error, UnexpectedCharacters):
        return f"unexpected character {error.char!r}, expected {_expected(error.allowed)}"
    if isinstance(error, UnexpectedToken):
        return f"unexpected {error.token.value!r}, expected {_expected(error.expected)}"
    return str(error)


def format_syntax_error(text: str, error: UnexpectedInput, source: str = "<stdin>") -> str:
    """Render a parse failure as ``source:line:column: error: ...`` plus a caret line."""
    lines = text.split("\n")
    if _at_end(error) or not error.line or error.line < 1:
        line, column = len(lines), len(lines[-1]) + 1
    else:
        line, column = error.line, error.column
    context = lines[line - 1]
    return f"{source}:{line}:{column}: error: {describe(error)}\n{context}\n{' ' * (column - 1)}^"


def pretty(tree: Tree, indent: str = "  ") -> str:
    """Indented dump of ``tree``, like ``Tree.pretty()`` but without recursion."""
    lines = []
    stack = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, Tree):
            lines.append(f"{indent * depth}{node.data}")
            stack.extend((child, depth + 1) for child in reversed(node.children))
        else:
            lines.append(f"{indent * depth}{node}")
    return "\n".join(lines)
