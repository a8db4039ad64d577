from dataclasses import dataclass
from typing import Tuple, Union

from lark import Tree, v_args
from lark.visitors import Transformer_NonRecursive


@dataclass(frozen=True)
class Number:
    """A numeric literal, kept as text until it is evaluated."""
    literal: str


@dataclass(frozen=True)
class Application:
    """An operator applied to one or more operands, left to right."""
    operator: str
    operands: Tuple["Node", ...]

    def __post_init__(self):
        if not self.operands:
            raise ValueError(f"operator {self.operator!r} applied to no operands")


Node = Union[Number, Application]


@v_args(inline=True)
class AstBuilder(Transformer_NonRecursive):
    """Translate the lark parse tree into ``Number``/``Application`` nodes.

    The bare top-level ``program`` and a parenthesized ``application``
    produce the same node. Nesting depth is limited only by memory.
    """

    def number(self, tok):
        return Number(str(tok))

    def operator(self, tok):
        return str(tok)

    def application(self, op, *operands):
        return Application(op, operands)

    program = application


def to_ast(tree: Tree) -> Node:
    return AstBuilder().transform(tree)
