import logging

from .nodes import Application, Node, Number
from .values import Err, ErrorKind, Num, Result, in_range, trunc_div, trunc_mod, wrap

logger = logging.getLogger(__name__)


def parse_number(literal: str) -> Result:
    """Read a base-10 literal; anything outside the 64-bit range is an error value."""
    try:
        value = int(literal, 10)
    except ValueError:
        return Err(ErrorKind.INVALID_NUMBER)
    if not in_range(value):
        return Err(ErrorKind.INVALID_NUMBER)
    return Num(value)


def apply_operator(x: Result, op: str, y: Result) -> Result:
    """Combine two results. The left error wins over the right one."""
    if isinstance(x, Err):
        return x
    if isinstance(y, Err):
        return y

    a, b = x.value, y.value
    if op == "+":
        return Num(wrap(a + b))
    if op == "-":
        return Num(wrap(a - b))
    if op == "*":
        return Num(wrap(a * b))
    if op == "/":
        return Err(ErrorKind.DIVIDE_BY_ZERO) if b == 0 else Num(trunc_div(a, b))
    if op == "%":
        return Err(ErrorKind.DIVIDE_BY_ZERO) if b == 0 else Num(trunc_mod(a, b))
    return Err(ErrorKind.UNKNOWN_OPERATOR)


def evaluate(node: Node) -> Result:
    """Reduce ``node`` to a result with a post-order walk over an explicit stack.

    Every operand is evaluated, even after the accumulator has become an
    error; the combination step then keeps the leftmost error.
    """
    # frames are [application, index of the operand just evaluated, accumulator]
    stack = []
    while True:
        while isinstance(node, Application):
            stack.append([node, 0, None])
            node = node.operands[0]
        if not isinstance(node, Number):
            raise TypeError(f"cannot evaluate {type(node).__name__}")
        value = parse_number(node.literal)

        while stack:
            frame = stack[-1]
            application, index, acc = frame
            if index == 0:
                acc = value
            else:
                logger.debug("fold %s %s %s", acc, application.operator, value)
                acc = apply_operator(acc, application.operator, value)
            index += 1
            if index < len(application.operands):
                frame[1], frame[2] = index, acc
                node = application.operands[index]
                break
            stack.pop()
            value = acc
        else:
            return value
