"""Stack evaluation of reverse polish notation, with IEEE-754 semantics.

Python traps on e.g. ``1.0/0.0`` and ``10.0**400``; here those give ``inf``
(as they would on the CPU, or in numpy), and ``0/0`` or ``(-8)^0.5`` give NaN.

>>> solve("1+2*3^4")
'163'
>>> solve("3-2+22/(33-33)")
'inf'
"""
import logging
import math
import operator

from shunting_yard import (
    Operand,
    Operator,
    StackUnderflow,
    TooManyOperands,
    UnknownOperator,
    canonicalize_num,
    convert,
    format_rpn,
)

logger = logging.getLogger(__name__)


def _is_odd_integer(x):
    return math.isfinite(x) and abs(math.fmod(x, 2.0)) == 1.0


def truediv(a, b):
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1, b)


def power(a, b):
    """a^b like C's pow: never raises, overflows to ±inf, domain errors give NaN."""
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
    except ValueError:
        if a == 0:  # 0^-n
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan  # negative base, fractional exponent


BINARY = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": truediv,
    "^": power,
}


def eval_rpn(tokens):
    """Reduce `tokens`, in reverse polish order, to a single float.

    >>> eval_rpn([Operand(2.0), Operand(3.0), Operand(2.0), Operator("^"), Operator("^")])
    512.0
    """
    stack = []

    def pop():
        if not stack:
            raise StackUnderflow("Stack underflow: operator is missing an operand")
        return stack.pop()

    for tok in tokens:
        if isinstance(tok, Operand):
            stack.append(float(tok.value))
        elif isinstance(tok, Operator):
            b, a = pop(), pop()
            if (fun := BINARY.get(tok.op)) is None:
                raise UnknownOperator(tok.op)
            stack.append(fun(a, b))
        else:
            raise TypeError(f"Not an RPN token: {tok!r}")

    if not stack:
        raise StackUnderflow("Stack underflow: nothing to evaluate")
    ans = stack.pop()
    if stack:
        raise TooManyOperands(
            f"{len(stack) + 1} values left after evaluation, expected 1"
        )
    return ans


def solve(s):
    """Evaluate the infix expression `s`; return the result as a string."""
    rpn = convert(s)
    logger.debug("rpn of %r: %s", s, format_rpn(rpn))
    ans = canonicalize_num(eval_rpn(rpn))
    logger.debug("%r = %s", s, ans)
    return ans
