"""Compressor: COO list to CSR or CSC arrays.

One routine serves both layouts; only the choice of major axis differs.
"""

import logging
from typing import Optional, Union

import numpy as np

from ._reader import CoordinateList
from .._dtypes import validate_index_dtype
from .._config import _get_index_dtype
from ..error import IndexOverflowError
from ..sparse import CSCMatrix, CSRMatrix, SparseFormat

__all__ = ['compress', 'compress_offsets', 'check_capacity']

logger = logging.getLogger("mmsparse.io")


def compress_offsets(major: np.ndarray, major_dim: int, index_dtype: np.dtype) -> np.ndarray:
    """Offsets array for ``major`` indices (need not be sorted).

    ``offsets[m + 1] - offsets[m]`` is the number of entries with major
    index ``m``; empty slices, trailing ones included, repeat the previous
    offset. Length is ``major_dim + 1``.
    """
    counts = np.bincount(major, minlength=major_dim)
    offsets = np.zeros(major_dim + 1, dtype=index_dtype)
    offsets[1:] = np.cumsum(counts)
    return offsets


def check_capacity(nnz: int, index_dtype: np.dtype) -> None:
    """Raise IndexOverflowError if ``nnz`` cannot be stored as an ``index_dtype`` offset."""
    index_dtype = np.dtype(index_dtype)
    if nnz > np.iinfo(index_dtype).max:
        raise IndexOverflowError(
            f"{nnz} entries do not fit {index_dtype.name} offsets"
        )


def compress(
    coords: CoordinateList,
    num_rows: int,
    num_cols: int,
    fmt: str = SparseFormat.CSR,
    index_dtype: Optional[np.dtype] = None,
) -> Union[CSRMatrix, CSCMatrix]:
    """Sort ``coords`` by (major, minor) and fold into a compressed matrix.

    The sort is stable, so entries sharing a coordinate keep their arrival
    order. Duplicates are not merged.

    Args:
        coords: Unordered 0-indexed entries
        num_rows: Row count of the matrix
        num_cols: Column count of the matrix
        fmt: 'csr' (rows major) or 'csc' (columns major)
        index_dtype: Dtype of offsets and minor indices (config default if None)

    Returns:
        CSRMatrix or CSCMatrix

    Raises:
        ValueError: If fmt is not 'csr' or 'csc'
        IndexOverflowError: If the entry count does not fit index_dtype
    """
    index_dtype = validate_index_dtype(index_dtype if index_dtype is not None else _get_index_dtype())

    if fmt == SparseFormat.CSR:
        major, minor, major_dim, cls = coords.rows, coords.cols, num_rows, CSRMatrix
    elif fmt == SparseFormat.CSC:
        major, minor, major_dim, cls = coords.cols, coords.rows, num_cols, CSCMatrix
    else:
        raise ValueError(f"fmt must be 'csr' or 'csc', got {fmt!r}")

    nnz = len(coords)
    if nnz:
        for name, arr, dim in (('row', coords.rows, num_rows), ('col', coords.cols, num_cols)):
            if arr.min() < 0 or arr.max() >= dim:
                raise ValueError(f"{name} index out of range [0, {dim})")
    check_capacity(nnz, index_dtype)

    # lexsort: last key is primary
    order = np.lexsort((minor, major))

    matrix = cls(
        num_rows,
        num_cols,
        nnz,
        compress_offsets(major, major_dim, index_dtype),
        minor[order].astype(index_dtype),
        coords.values[order],
    )
    logger.debug(f"Compressed {nnz} entries into {matrix!r}")
    return matrix
