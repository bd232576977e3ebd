"""Coordinate reader: data lines to an unordered COO list."""

from dataclasses import dataclass
import logging
from typing import Optional, TextIO, Union

import numpy as np

from ._header import MatrixMarketHeader
from ._lines import LineReader, as_line_reader
from ._numbers import parse_int, parse_value
from ._tokens import Tokens
from .._dtypes import validate_value_dtype
from .._config import _get_value_dtype
from ..error import (
    FormatError,
    MMS_ERROR_ILL_SHAPED_LINE,
    MMS_ERROR_OUT_OF_BOUNDS,
    MMS_ERROR_UNEXPECTED_EOF,
)

__all__ = ['CoordinateList', 'read_coordinates']

logger = logging.getLogger("mmsparse.io")


@dataclass
class CoordinateList:
    """Unordered 0-indexed (row, col, value) triples in arrival order.

    Attributes:
        rows: Row indices (np.intp)
        cols: Column indices (np.intp)
        values: Entry values (value dtype)
    """
    rows: np.ndarray
    cols: np.ndarray
    values: np.ndarray

    def __post_init__(self):
        if not (len(self.rows) == len(self.cols) == len(self.values)):
            raise ValueError(
                f"rows, cols and values must have equal length, got "
                f"{len(self.rows)}, {len(self.cols)}, {len(self.values)}"
            )

    def __len__(self) -> int:
        return len(self.rows)

    @classmethod
    def from_triples(cls, triples, value_dtype=np.float64) -> 'CoordinateList':
        """Build from an iterable of 0-indexed (row, col, value) tuples."""
        triples = list(triples)
        return cls(
            rows=np.array([t[0] for t in triples], dtype=np.intp),
            cols=np.array([t[1] for t in triples], dtype=np.intp),
            values=np.array([t[2] for t in triples], dtype=value_dtype),
        )


def read_coordinates(
    stream: Union[TextIO, LineReader],
    header: MatrixMarketHeader,
    value_dtype: Optional[np.dtype] = None,
) -> CoordinateList:
    """Read ``header.num_nonzeros`` data lines following the header.

    Coordinates are bounds-checked while still 1-indexed, then shifted to
    0-indexed. For symmetric files every off-diagonal entry is also stored
    mirrored, and the mirrored position is bounds-checked too; diagonal
    entries are stored once. Duplicate coordinates are kept as separate
    entries.

    Args:
        stream: Stream positioned on the first data line
        header: Header returned by read_header
        value_dtype: Dtype of the values (config default if None)

    Returns:
        CoordinateList with up to ``2 * num_nonzeros`` entries

    Raises:
        FormatError: Ill-shaped line, out-of-bounds coordinate or early EOF
        MalformedNumberError: Non-numeric coordinate or value
    """
    value_dtype = validate_value_dtype(value_dtype if value_dtype is not None else _get_value_dtype())
    lines = as_line_reader(stream)

    pattern = header.is_pattern
    symmetric = header.is_symmetric
    expected = 2 if pattern else 3
    num_rows = header.num_rows
    num_cols = header.num_cols

    rows = []
    cols = []
    values = []

    for i in range(header.num_nonzeros):
        line = lines.readline()
        if line is None:
            raise FormatError(
                f"expected {header.num_nonzeros} data lines, found {i}",
                code=MMS_ERROR_UNEXPECTED_EOF,
                line_number=lines.line_number + 1,
            )
        lineno = lines.line_number

        tokens = Tokens(line, ' ')
        if tokens.count() != expected:
            kind = "pattern" if pattern else "value"
            raise FormatError(
                f"ill-shaped {kind} line: expected {expected} fields, got {tokens.count()}",
                code=MMS_ERROR_ILL_SHAPED_LINE,
                line_number=lineno,
            )

        row = parse_int(tokens.pop(), lineno)
        col = parse_int(tokens.pop(), lineno)
        value = 1 if pattern else parse_value(tokens.pop(), value_dtype, lineno)

        if row < 1 or row > num_rows:
            raise FormatError(
                f"row {row} out of bounds [1, {num_rows}]",
                code=MMS_ERROR_OUT_OF_BOUNDS,
                line_number=lineno,
            )
        if col < 1 or col > num_cols:
            raise FormatError(
                f"col {col} out of bounds [1, {num_cols}]",
                code=MMS_ERROR_OUT_OF_BOUNDS,
                line_number=lineno,
            )
        # Mirrored (col, row) must also lie inside a non-square matrix
        if symmetric and row != col and (col > num_rows or row > num_cols):
            raise FormatError(
                f"mirrored entry ({col}, {row}) out of bounds [1, {num_rows}] x [1, {num_cols}]",
                code=MMS_ERROR_OUT_OF_BOUNDS,
                line_number=lineno,
            )

        row -= 1
        col -= 1

        rows.append(row)
        cols.append(col)
        values.append(value)
        if symmetric and row != col:
            rows.append(col)
            cols.append(row)
            values.append(value)

    coords = CoordinateList(
        rows=np.array(rows, dtype=np.intp),
        cols=np.array(cols, dtype=np.intp),
        values=np.array(values, dtype=value_dtype),
    )
    logger.debug(
        f"Read {header.num_nonzeros} data lines, {len(coords)} entries after expansion"
    )
    return coords
