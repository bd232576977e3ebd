"""Decoder entry points: MatrixMarket file to CSR / CSC.

Pipeline:

    read_header -> read_coordinates -> compress

Each call owns its stream, accumulator and output arrays; nothing is shared
between calls, so separate threads may decode concurrently.
"""

import logging
import os
from typing import Optional, TextIO, Union

import numpy as np

from ._compress import compress
from ._header import read_header
from ._lines import LineReader
from ._reader import read_coordinates
from .._dtypes import DTypeLike, validate_index_dtype, validate_value_dtype
from .._config import config
from ..error import MatrixMarketIOError
from ..sparse import CompressedMatrix, CSCMatrix, CSRMatrix, SparseFormat

__all__ = [
    'decode',
    'decode_stream',
    'decode_as_row_major',
    'decode_as_column_major',
    'read_csr',
    'read_csc',
]

logger = logging.getLogger("mmsparse.io")

PathLike = Union[str, os.PathLike]


def _resolve_dtypes(index_dtype, value_dtype):
    if index_dtype is None:
        index_dtype = config.default_index.numpy_dtype
    if value_dtype is None:
        value_dtype = config.default_value.numpy_dtype
    return validate_index_dtype(index_dtype), validate_value_dtype(value_dtype)


def _check_format(format: str) -> str:
    if format not in (SparseFormat.CSR, SparseFormat.CSC):
        raise ValueError(f"format must be 'csr' or 'csc', got {format!r}")
    return format


def _decode_lines(
    lines: LineReader,
    format: str,
    index_dtype: np.dtype,
    value_dtype: np.dtype,
) -> CompressedMatrix:
    header = read_header(lines, index_dtype)
    coords = read_coordinates(lines, header, value_dtype)
    return compress(coords, header.num_rows, header.num_cols, format, index_dtype)


def decode_stream(
    stream: TextIO,
    format: str = SparseFormat.CSR,
    index_dtype: Optional[DTypeLike] = None,
    value_dtype: Optional[DTypeLike] = None,
) -> CompressedMatrix:
    """Decode an open text stream positioned at the start of a MatrixMarket file.

    Args:
        stream: Text stream (e.g. ``open(path)`` or ``io.StringIO``)
        format: 'csr' or 'csc'
        index_dtype: Coordinate dtype (config default if None)
        value_dtype: Value dtype (config default if None)

    Returns:
        CSRMatrix or CSCMatrix
    """
    format = _check_format(format)
    index_dtype, value_dtype = _resolve_dtypes(index_dtype, value_dtype)
    return _decode_lines(LineReader(stream), format, index_dtype, value_dtype)


def decode(
    path: PathLike,
    format: str = SparseFormat.CSR,
    index_dtype: Optional[DTypeLike] = None,
    value_dtype: Optional[DTypeLike] = None,
) -> CompressedMatrix:
    """Decode the MatrixMarket file at ``path``.

    Args:
        path: Filesystem path
        format: 'csr' (row major) or 'csc' (column major)
        index_dtype: Coordinate dtype (config default if None)
        value_dtype: Value dtype (config default if None)

    Returns:
        CSRMatrix or CSCMatrix

    Raises:
        MatrixMarketIOError: Path cannot be opened or read
        FormatError: Structural violation
        MalformedNumberError: Numeric token fails to parse
        IndexOverflowError: Entry count does not fit index_dtype
    """
    format = _check_format(format)
    index_dtype, value_dtype = _resolve_dtypes(index_dtype, value_dtype)
    filename = os.fspath(path)
    encoding = config.encoding

    logger.info(f"Decoding {filename} as {format} ({index_dtype.name}/{value_dtype.name})")
    try:
        f = open(filename, 'r', encoding=encoding)
    except OSError as e:
        raise MatrixMarketIOError.from_os_error(e, filename) from e

    with f:
        return _decode_lines(LineReader(f, filename), format, index_dtype, value_dtype)


def decode_as_row_major(
    path: PathLike,
    index_dtype: Optional[DTypeLike] = None,
    value_dtype: Optional[DTypeLike] = None,
) -> CSRMatrix:
    """Decode the MatrixMarket file at ``path`` into a CSRMatrix.

    Example:
        >>> csr = decode_as_row_major("m.mtx", index_dtype="int32", value_dtype="float32")
        >>> csr.row_offsets, csr.col_indices, csr.values
    """
    return decode(path, SparseFormat.CSR, index_dtype, value_dtype)


def decode_as_column_major(
    path: PathLike,
    index_dtype: Optional[DTypeLike] = None,
    value_dtype: Optional[DTypeLike] = None,
) -> CSCMatrix:
    """Decode the MatrixMarket file at ``path`` into a CSCMatrix."""
    return decode(path, SparseFormat.CSC, index_dtype, value_dtype)


# Aliases
read_csr = decode_as_row_major
read_csc = decode_as_column_major
