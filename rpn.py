"""Evaluation of postfix (reverse polish) token sequences.

All arithmetic is done on numpy doubles with floating point errors ignored, so
division by zero gives ±inf (or nan for 0/0) just like the hardware does,
rather than raising ZeroDivisionError.
"""
import logging

import numpy as np

from infix import Number, Op, to_postfix, tokenize

logger = logging.getLogger(__name__)


class MalformedExpression(ValueError):
    pass


def evaluate(postfix):
    """Return the value of `postfix`, or None if it doesn't reduce to exactly one value.

    Raises `MalformedExpression` if an operator is short of operands.

    >>> evaluate(to_postfix(tokenize("2+3*4")))
    14.0
    >>> evaluate(to_postfix(tokenize("1/0")))
    inf
    >>> evaluate(to_postfix(tokenize("1 2"))) is None
    True
    """
    stack = []
    with np.errstate(all="ignore"):
        for token in postfix:
            if isinstance(token, Number):
                stack.append(np.float64(token.value))
            elif isinstance(token, Op):
                if len(stack) < 2:
                    raise MalformedExpression(
                        f"{token.op!r} needs 2 operands, found {len(stack)}"
                    )
                right = stack.pop()
                left = stack.pop()
                stack.append(token(left, right))
    if len(stack) != 1:
        logger.debug(f"{len(stack)} values left on the stack, no result")
        return None
    (ans,) = stack
    logger.debug(f"result: {ans}")
    return float(ans)


def calculate(text):
    """Tokenize, convert and evaluate `text`.

    >>> calculate("(2+3)*4")
    20.0
    >>> calculate("")
    """
    return evaluate(to_postfix(tokenize(text)))
