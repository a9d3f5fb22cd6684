"""Named scalar functions for ``assign`` and ``aggregate``.

Unary functions take one float, binary functions take two. They are plain
callables, so lambdas work equally well wherever these are accepted.
"""

import math
import operator
from typing import Callable

__all__ = [
    'UnaryFunction',
    'BinaryFunction',
    'IDENTITY',
    'NEGATE',
    'ABS',
    'SQUARE',
    'SQRT',
    'PLUS',
    'MINUS',
    'MULT',
    'DIV',
    'MAX',
    'MIN',
    'SECOND',
    'plus',
    'mult',
    'plus_mult',
]

UnaryFunction = Callable[[float], float]
BinaryFunction = Callable[[float, float], float]


def IDENTITY(a: float) -> float:
    return a


NEGATE: UnaryFunction = operator.neg
ABS: UnaryFunction = abs
SQRT: UnaryFunction = math.sqrt


def SQUARE(a: float) -> float:
    return a * a


PLUS: BinaryFunction = operator.add
MINUS: BinaryFunction = operator.sub
MULT: BinaryFunction = operator.mul
DIV: BinaryFunction = operator.truediv
MAX: BinaryFunction = max
MIN: BinaryFunction = min


def SECOND(a: float, b: float) -> float:
    return b


def plus(d: float) -> UnaryFunction:
    """``a -> a + d``"""
    return lambda a: a + d


def mult(d: float) -> UnaryFunction:
    """``a -> a * d``"""
    return lambda a: a * d


def plus_mult(d: float) -> BinaryFunction:
    """``(a, b) -> a + d * b``

    Used by ``times_squared`` to accumulate scaled rows.
    """
    return lambda a, b: a + d * b
