"""MatrixMarket header parsing.

The header is the banner line

    %%MatrixMarket matrix coordinate <value_format> <symmetry>

followed by optional ``%`` comment lines and the dimension line
``<num_rows> <num_cols> <num_nonzeros>``.
"""

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Optional, TextIO, Tuple, Union

import numpy as np

from ._tokens import Tokens
from ._lines import LineReader, as_line_reader
from ._numbers import parse_int, check_fits
from .._dtypes import validate_index_dtype
from .._config import _get_index_dtype
from ..error import (
    FormatError,
    MMS_ERROR_BAD_BANNER,
    MMS_ERROR_UNSUPPORTED_OBJECT,
    MMS_ERROR_UNSUPPORTED_FORMAT,
    MMS_ERROR_UNKNOWN_VALUE_FORMAT,
    MMS_ERROR_UNKNOWN_SYMMETRY,
    MMS_ERROR_ILL_SHAPED_LINE,
    MMS_ERROR_UNEXPECTED_EOF,
    MMS_ERROR_INVALID_DIMENSION,
)

__all__ = [
    'BANNER',
    'Symmetry',
    'ValueFormat',
    'MatrixMarketHeader',
    'parse_value_format',
    'parse_symmetry',
    'read_header',
]

logger = logging.getLogger("mmsparse.io")

BANNER = '%%MatrixMarket'


class Symmetry(Enum):
    """Symmetry declared in the banner."""
    GENERAL = 'general'
    SYMMETRIC = 'symmetric'


class ValueFormat(Enum):
    """Value field declared in the banner."""
    REAL = 'real'
    INTEGER = 'integer'
    PATTERN = 'pattern'


@dataclass(frozen=True)
class MatrixMarketHeader:
    """Validated header of a coordinate MatrixMarket file."""
    symmetry: Symmetry
    value_format: ValueFormat
    num_rows: int
    num_cols: int
    num_nonzeros: int  # as declared; symmetric expansion may store more

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.num_rows, self.num_cols)

    @property
    def is_symmetric(self) -> bool:
        return self.symmetry is Symmetry.SYMMETRIC

    @property
    def is_pattern(self) -> bool:
        return self.value_format is ValueFormat.PATTERN


def parse_value_format(text: str) -> ValueFormat:
    """Map a banner literal (``real``, ``integer``, ``pattern``) to ValueFormat."""
    try:
        return ValueFormat(text)
    except ValueError:
        raise FormatError(
            f"unknown value format {text!r}", code=MMS_ERROR_UNKNOWN_VALUE_FORMAT
        ) from None


def parse_symmetry(text: str) -> Symmetry:
    """Map a banner literal (``general``, ``symmetric``) to Symmetry."""
    try:
        return Symmetry(text)
    except ValueError:
        raise FormatError(
            f"unknown symmetry {text!r}", code=MMS_ERROR_UNKNOWN_SYMMETRY
        ) from None


def _parse_banner(line: str) -> Tuple[ValueFormat, Symmetry]:
    tokens = Tokens(line, ' ')
    if tokens.count() != 5:
        raise FormatError(
            f"ill-shaped format line: expected 5 fields, got {tokens.count()}",
            code=MMS_ERROR_ILL_SHAPED_LINE,
            line_number=1,
        )
    if tokens.pop() != BANNER:
        raise FormatError(f"missing {BANNER}", code=MMS_ERROR_BAD_BANNER, line_number=1)

    obj = tokens.pop()
    if obj != 'matrix':
        raise FormatError(
            f"unsupported object {obj!r}: only matrix is supported",
            code=MMS_ERROR_UNSUPPORTED_OBJECT,
            line_number=1,
        )
    fmt = tokens.pop()
    if fmt != 'coordinate':
        raise FormatError(
            f"unsupported format {fmt!r}: only coordinate matrices are supported",
            code=MMS_ERROR_UNSUPPORTED_FORMAT,
            line_number=1,
        )

    value_format = parse_value_format(tokens.pop())
    symmetry = parse_symmetry(tokens.pop())
    return value_format, symmetry


def read_header(
    stream: Union[TextIO, LineReader],
    index_dtype: Optional[np.dtype] = None,
) -> MatrixMarketHeader:
    """Read the banner and dimension line from ``stream``.

    The stream must be positioned at the start of the file. On return it is
    positioned on the first data line.

    Args:
        stream: Text stream (or LineReader) yielding lines
        index_dtype: Coordinate dtype the dimensions must fit (config default if None)

    Returns:
        Parsed header

    Raises:
        FormatError: Structural violation in the banner or dimension line
        MalformedNumberError: Non-integer or out-of-range dimension
    """
    index_dtype = validate_index_dtype(index_dtype if index_dtype is not None else _get_index_dtype())
    lines = as_line_reader(stream)

    first = lines.readline()
    if first is None:
        raise FormatError("empty file", code=MMS_ERROR_UNEXPECTED_EOF, line_number=1)
    value_format, symmetry = _parse_banner(first)

    # Skip comments up to the size line
    line = lines.readline()
    while line is not None and line.startswith('%'):
        line = lines.readline()
    if line is None:
        raise FormatError(
            "missing matrix size line",
            code=MMS_ERROR_UNEXPECTED_EOF,
            line_number=lines.line_number + 1,
        )
    line_number = lines.line_number

    tokens = Tokens(line, ' ')
    if tokens.count() != 3:
        raise FormatError(
            f"ill-shaped size line: expected 3 fields, got {tokens.count()}",
            code=MMS_ERROR_ILL_SHAPED_LINE,
            line_number=line_number,
        )

    dims = []
    for name in ('num_rows', 'num_cols', 'num_nonzeros'):
        token = tokens.pop()
        value = parse_int(token, line_number)
        if value < 0:
            raise FormatError(
                f"{name} must be non-negative, got {value}",
                code=MMS_ERROR_INVALID_DIMENSION,
                line_number=line_number,
            )
        check_fits(value, token, index_dtype, line_number)
        dims.append(value)

    header = MatrixMarketHeader(
        symmetry=symmetry,
        value_format=value_format,
        num_rows=dims[0],
        num_cols=dims[1],
        num_nonzeros=dims[2],
    )
    logger.debug(
        f"Parsed header: shape={header.shape}, nnz={header.num_nonzeros}, "
        f"field={value_format.value}, symmetry={symmetry.value}"
    )
    return header
