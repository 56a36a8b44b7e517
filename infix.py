"""Lexing of infix arithmetic and conversion to postfix (shunting-yard)."""
import logging
import math
import operator
import re
from typing import Callable, Literal, NamedTuple

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789.")


def canonicalize_num(num):
    """
    >>> canonicalize_num(14.0), canonicalize_num(2.5), canonicalize_num(float("inf"))
    ('14', '2.5', 'inf')
    """
    return repr(int(num) if math.isfinite(num) and num == int(num) else num)


class LexError(ValueError):
    pass


class BadToken(LexError):
    def __init__(self, char):
        super().__init__(f"bad token {char!r}")
        self.char = char


class MismatchedParen(LexError):
    def __init__(self):
        super().__init__("mismatched parenthesis")


class InvalidNumber(LexError):
    def __init__(self, text):
        super().__init__(f"invalid number {text!r}")
        self.text = text


class Number(NamedTuple):
    value: float

    def __repr__(self):
        return f"num({canonicalize_num(self.value)})"


class Op(NamedTuple):
    op: str
    prec: int
    fun: Callable

    def __call__(self, *args):
        return self.fun(*args)

    def __repr__(self):
        return f"op({self.op!r:})"


class Bracket(NamedTuple):
    kind: Literal["(", ")"]

    def __repr__(self):
        return f"bracket({self.kind!r})"


OPEN = Bracket("(")
CLOSE = Bracket(")")

# One line per precedence rank, lowest first.
OP_GROUPS = """
add+ sub-
truediv/ mul*
""".strip()
OPS = {
    o: Op(o, prec, getattr(operator, fun))
    for prec, op_groups in enumerate(OP_GROUPS.split("\n"), start=1)
    for [(fun, o)] in map(re.compile(r"^(\w+)(\W)$").findall, op_groups.split())
}


def precedence(token):
    """Rank used when popping the operator stack; `OPEN` ranks below every `Op`.

    >>> precedence(OPS["*"]) > precedence(OPS["-"]) > precedence(OPEN)
    True
    """
    if isinstance(token, Op):
        return token.prec
    assert token == OPEN, f"{token!r} has no precedence"
    return 0


def _number(digits):
    text = "".join(digits)
    try:
        return Number(float(text))
    except ValueError:
        raise InvalidNumber(text) from None


def tokenize(text):
    """Split `text` into `Number`, `Op` and `Bracket` tokens.

    Whitespace separates numbers; brackets must balance.

    >>> tokenize("2+3*4")
    [num(2), op('+'), num(3), op('*'), num(4)]
    >>> tokenize("(1.5)")
    [bracket('('), num(1.5), bracket(')')]
    >>> tokenize("3&4")
    Traceback (most recent call last):
        ...
    infix.BadToken: bad token '&'
    """
    tokens = []
    digits = []
    depth = 0
    for c in text:
        if c in DIGITS:
            digits.append(c)
            continue
        if not (c in OPS or c in "()" or c.isspace()):
            raise BadToken(c)
        if digits:
            tokens.append(_number(digits))
            digits.clear()
        if c in OPS:
            tokens.append(OPS[c])
        elif c == "(":
            tokens.append(OPEN)
            depth += 1
        elif c == ")":
            if not depth:
                raise MismatchedParen()
            tokens.append(CLOSE)
            depth -= 1
    if digits:
        tokens.append(_number(digits))
    if depth:
        raise MismatchedParen()
    logger.debug(f"tokenize({text!r}) -> {tokens}")
    return tokens


def to_postfix(tokens):
    """Reorder infix `tokens` into postfix order, dropping all brackets.

    Equal precedence pops first, so operators are left-associative.

    >>> unparse(to_postfix(tokenize("(2+3)*4")))
    '2 3 + 4 *'
    >>> unparse(to_postfix(tokenize("8 - 4 - 2")))
    '8 4 - 2 -'
    """
    output = []
    stack = []
    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Op):
            while stack and precedence(stack[-1]) >= token.prec:
                output.append(stack.pop())
            stack.append(token)
        elif token == OPEN:
            stack.append(token)
        else:
            assert token == CLOSE, f"unexpected token {token!r}"
            while True:
                assert stack, "unbalanced brackets"
                if (top := stack.pop()) == OPEN:
                    break
                output.append(top)
    while stack:
        top = stack.pop()
        assert top != OPEN, "unbalanced brackets"
        output.append(top)
    logger.debug(f"postfix: {unparse(output)}")
    return output


def unparse(tokens):
    """
    >>> unparse([Number(2.0), Number(0.5), OPS["/"]])
    '2 0.5 /'
    """
    return " ".join(
        canonicalize_num(t.value) if isinstance(t, Number) else t.op if isinstance(t, Op) else t.kind
        for t in tokens
    )
