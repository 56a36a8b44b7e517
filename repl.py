"""Read expressions line by line and print their values.

Set the DEBUG environment variable to see tokens and postfix forms as they
are produced.
"""
import logging
import os
import sys

from infix import LexError, canonicalize_num
from rpn import MalformedExpression, calculate

DEBUG = bool(os.getenv("DEBUG", False))

logger = logging.getLogger(__name__)


def format_answer(value):
    """
    >>> format_answer(14.0)
    'Ans : 14'
    >>> format_answer(-0.25)
    'Ans : -0.25'
    """
    return f"Ans : {canonicalize_num(value)}"


def run(lines, out=None):
    """Evaluate every non-blank line of `lines`, printing one result per line to `out`.

    >>> run(["2+3*4", "3&4", "1 2"])
    Ans : 14
    BadToken: bad token '&'
    MalformedExpression: expression does not reduce to a single value
    """
    for line in lines:
        if not line.strip():
            continue
        try:
            ans = calculate(line)
        except (LexError, MalformedExpression) as e:
            logger.debug(f"rejected {line!r}: {e!r}")
            print(f"{type(e).__name__}: {e}", file=out)
            continue
        if ans is None:
            print(
                "MalformedExpression: expression does not reduce to a single value",
                file=out,
            )
        else:
            print(format_answer(ans), file=out)


def main():
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    try:
        run(sys.stdin)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
