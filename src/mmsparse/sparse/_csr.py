"""CSR (Compressed Sparse Row) matrix.

Row-major result of decoding a MatrixMarket file:

    row_offsets[i] .. row_offsets[i + 1]  ->  entries of row i
    col_indices                           ->  column of each entry
    values                                ->  value of each entry

Example:
    >>> csr = decode_as_row_major("m.mtx")
    >>> cols, vals = csr.get_row(0)
"""

from typing import Tuple

import numpy as np

from ._base import CompressedMatrix, SparseFormat

__all__ = ['CSRMatrix', 'CSR']


class CSRMatrix(CompressedMatrix):
    """Compressed sparse row matrix (major axis = rows)."""

    format = SparseFormat.CSR

    __slots__ = ()

    @property
    def major_dim(self) -> int:
        return self.num_rows

    @property
    def minor_dim(self) -> int:
        return self.num_cols

    def _dense_coords(self, major: np.ndarray, minor: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        return major, minor

    @property
    def row_offsets(self) -> np.ndarray:
        """Row pointer array (length num_rows + 1)."""
        return self.major_offsets

    @property
    def col_indices(self) -> np.ndarray:
        """Column index of each stored entry."""
        return self.minor_indices

    # scipy-style names
    indptr = row_offsets
    indices = col_indices

    def get_row(self, i: int) -> Tuple[np.ndarray, np.ndarray]:
        """Column indices and values of row ``i``."""
        return self.major_slice(i)


# Alias
CSR = CSRMatrix
