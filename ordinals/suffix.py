from numbers import Integral
from typing import Literal

from ordinals.constants import ND, RD, ST, SUFFIX_PERIOD, TEEN_HIGH, TEEN_LOW, TH

type Suffix = Literal['st', 'nd', 'rd', 'th']

_LAST_DIGIT_SUFFIXES: dict[int, Suffix] = {1: ST, 2: ND, 3: RD}


class NotAnIntegerError(TypeError):
    """custom exception for values that have no ordinal form"""
    def __init__(self, message: str = 'ordinals are only defined for integers') -> None:
        """initializes the error"""
        self.message = message
        super().__init__(self.message)


def as_int(value: Integral) -> int:
    """
    widens any integral value (python int, numpy int8..uint64, etc.) to a python int

    args:
        value: the integral value

    raises:
        NotAnIntegerError: for bools and anything that is not integral

    returns:
        the value as an unbounded python int
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        msg = f'expected an integer, got {type(value).__name__}: {value!r}'
        raise NotAnIntegerError(msg)
    return int(value)


def magnitude(value: Integral) -> int:
    """
    absolute value of `value`, taken after widening so fixed width minimums (eg int8 -128) cannot overflow

    args:
        value: the integral value

    returns:
        the magnitude as a python int
    """
    return abs(as_int(value))


def suffix(value: Integral) -> Suffix:
    """
    gets the ordinal suffix for a number without building the full ordinal string (eg 12 to 'th', -3 to 'rd')

    args:
        value: the integral value, the sign is ignored

    returns:
        one of 'st', 'nd', 'rd', 'th'
    """
    n = magnitude(value) % SUFFIX_PERIOD
    if TEEN_LOW <= n <= TEEN_HIGH:
        return TH
    return _LAST_DIGIT_SUFFIXES.get(n % 10, TH)
