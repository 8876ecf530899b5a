"""Infix arithmetic to reverse polish notation, via the shunting yard algorithm.

Supports the binary operators ``+ - * / ^``, parentheses and decimal literals
that use either ``.`` or ``,`` as the decimal separator.

>>> format_rpn(convert("3 + 4 * 2 / ( 1 - 5 ) ^ 2 ^ 3"))
'3 4 2 * 1 5 - 2 3 ^ ^ / +'
"""
import re
from typing import Literal, NamedTuple

import numpy as np


class ShuntingYardError(ValueError):
    """Malformed input expression."""


class NumberParseError(ShuntingYardError):
    pass


class UnknownOperator(ShuntingYardError):
    def __init__(self, char):
        super().__init__(f"Unknown operator: {char}")
        self.char = char


class MismatchedParenthesis(ShuntingYardError):
    def __init__(self, msg="Mismatched parenthesis"):
        super().__init__(msg)


class StackUnderflow(ShuntingYardError):
    def __init__(self, msg="Stack underflow"):
        super().__init__(msg)


class TooManyOperands(ShuntingYardError):
    pass


def canonicalize_num(num):
    """Shortest string that reads back as `num`, never in exponent notation.

    >>> canonicalize_num(3.0), canonicalize_num(0.1), canonicalize_num(float("-inf"))
    ('3', '0.1', '-inf')
    >>> canonicalize_num(1e20)
    '100000000000000000000'
    """
    return np.format_float_positional(num, trim="-")


class Operand(NamedTuple):
    value: float

    def __str__(self):
        return canonicalize_num(self.value)


class Operator(NamedTuple):
    op: str

    def __str__(self):
        return self.op


class Op(NamedTuple):
    op: str
    prec: int
    assoc: Literal["l", "r"]  # left-associative, right-associative

    def left_first(self, other):
        """Should `self`, pending on the stack, be applied before `other`?"""
        return self.prec > other.prec or self.prec == other.prec and self.assoc == "l"


# One line per precedence level, lowest first. Parentheses get the lowest
# precedence so that no operator ever reduces past an open parenthesis.
OP_GROUPS = """
(l )l
+l -l
*l /l
^r
""".strip()
OPS = {
    o: Op(o, prec, assoc)
    for prec, op_group in enumerate(OP_GROUPS.split("\n"), start=1)
    for [(o, assoc)] in map(re.compile(r"^(\W)([lr])$").findall, op_group.split())
}

DIGITS = frozenset("0123456789.,")


def parse_number(literal):
    try:
        return float(literal.replace(",", "."))
    except ValueError as e:
        raise NumberParseError(f"Cannot parse number: {literal!r}") from e


def lex(s):
    """Yield the `Operand` and `Operator` tokens of `s`, ignoring whitespace."""
    s = "".join(s.split())
    i = 0
    while i < len(s):
        if s[i] in DIGITS:
            start = i
            while i < len(s) and s[i] in DIGITS:
                i += 1
            yield Operand(parse_number(s[start:i]))
            continue
        if s[i] not in OPS:
            raise UnknownOperator(s[i])
        yield Operator(s[i])
        i += 1


def to_rpn(tokens):
    """Reorder infix `tokens` into reverse polish notation.

    >>> [str(t) for t in to_rpn(lex("2^3^2"))]
    ['2', '3', '2', '^', '^']
    """
    ops = []
    for tok in tokens:
        if isinstance(tok, Operand):
            yield tok
        elif tok.op == "(":
            ops.append(tok.op)
        elif tok.op == ")":
            while ops and ops[-1] != "(":
                yield Operator(ops.pop())
            if not ops:
                raise MismatchedParenthesis("Unmatched closing parenthesis")
            ops.pop()
        else:
            o = OPS[tok.op]
            while ops and OPS[ops[-1]].left_first(o):
                yield Operator(ops.pop())
            ops.append(tok.op)
    while ops:
        if (o := ops.pop()) == "(":
            raise MismatchedParenthesis("Unmatched opening parenthesis")
        assert o != ")", "closing parenthesis on the operator stack"
        yield Operator(o)


def convert(s):
    return list(to_rpn(lex(s)))


def format_rpn(tokens):
    return " ".join(map(str, tokens))
