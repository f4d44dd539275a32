from dataclasses import dataclass
from numbers import Integral

from ordinals.suffix import Suffix, as_int, suffix


def to_ordinal_string(value: Integral) -> str:
    """
    converts a number to its ordinal version (eg 1 to 1st, 4 to 4th, -3 to -3rd)

    args:
        value: the integral value to convert

    returns:
        the ordinal string
    """
    n = as_int(value)
    return f'{n}{suffix(n)}'


@dataclass(frozen=True, order=True, slots=True)
class Number:
    """
    an integer that displays as an ordinal; compares, orders and hashes by the wrapped integer

    attributes:
        value: the wrapped integer
    """
    value: int

    def __post_init__(self) -> None:
        """widens numpy and other integral types to a python int"""
        object.__setattr__(self, 'value', as_int(self.value))

    @property
    def suffix(self) -> Suffix:
        return suffix(self.value)

    def __str__(self) -> str:
        return to_ordinal_string(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


def to_number(value: Integral) -> Number:
    """wraps `value` in a `Number`"""
    return Number(value)
