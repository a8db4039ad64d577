"""Lispy: a prefix-notation integer calculator."""

__version__ = "0.0.1"

from .evaluator import apply_operator, evaluate
from .interpreter import Interpreter, Outcome
from .values import Err, ErrorKind, Num

__all__ = [
    "Interpreter",
    "Outcome",
    "Num",
    "Err",
    "ErrorKind",
    "evaluate",
    "apply_operator",
    "__version__",
]
