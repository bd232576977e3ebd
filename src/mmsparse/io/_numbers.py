"""Strict numeric parsing for MatrixMarket tokens.

Every parser either returns a value or raises MalformedNumberError; nothing
falls back to zero.
"""

import re
from typing import Optional, Union

import numpy as np

from ..error import MalformedNumberError, MMS_ERROR_OVERFLOW

__all__ = ['parse_int', 'check_fits', 'parse_index', 'parse_value']


_INT_RE = re.compile(r'[+-]?[0-9]+')
_REAL_RE = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def parse_int(token: str, line_number: Optional[int] = None) -> int:
    """Parse a decimal integer token into a Python int."""
    if not _INT_RE.fullmatch(token):
        raise MalformedNumberError(
            token, f"expected an integer, got {token!r}", line_number=line_number
        )
    return int(token)


def check_fits(
    value: int, token: str, dtype: np.dtype, line_number: Optional[int] = None
) -> None:
    """Raise MalformedNumberError (OVERFLOW) if ``value`` is outside ``dtype``."""
    dtype = np.dtype(dtype)
    info = np.iinfo(dtype)
    if value < info.min or value > info.max:
        raise MalformedNumberError(
            token,
            f"{token!r} does not fit {dtype.name} [{info.min}, {info.max}]",
            code=MMS_ERROR_OVERFLOW,
            line_number=line_number,
        )


def parse_index(token: str, dtype: np.dtype, line_number: Optional[int] = None) -> int:
    """Parse an integer token that must be representable by ``dtype``."""
    value = parse_int(token, line_number)
    check_fits(value, token, dtype, line_number)
    return value


def parse_value(
    token: str, dtype: np.dtype, line_number: Optional[int] = None
) -> Union[int, float]:
    """Parse a data value for storage in an array of ``dtype``.

    Integer dtypes accept integer tokens only. Float dtypes accept decimal
    and scientific notation; ``nan``/``inf`` spellings are rejected, as are
    finite tokens that overflow the dtype.
    """
    dtype = np.dtype(dtype)
    if dtype.kind in 'iu':
        value = parse_int(token, line_number)
        check_fits(value, token, dtype, line_number)
        return value

    if not _REAL_RE.fullmatch(token):
        raise MalformedNumberError(
            token, f"expected a real number, got {token!r}", line_number=line_number
        )
    value = float(token)
    if abs(value) > float(np.finfo(dtype).max):
        raise MalformedNumberError(
            token,
            f"{token!r} overflows {dtype.name}",
            code=MMS_ERROR_OVERFLOW,
            line_number=line_number,
        )
    return value
