"""CSC (Compressed Sparse Column) matrix.

Column-major result of decoding a MatrixMarket file:

    col_offsets[j] .. col_offsets[j + 1]  ->  entries of column j
    row_indices                           ->  row of each entry
    values                                ->  value of each entry
"""

from typing import Tuple

import numpy as np

from ._base import CompressedMatrix, SparseFormat

__all__ = ['CSCMatrix', 'CSC']


class CSCMatrix(CompressedMatrix):
    """Compressed sparse column matrix (major axis = columns)."""

    format = SparseFormat.CSC

    __slots__ = ()

    @property
    def major_dim(self) -> int:
        return self.num_cols

    @property
    def minor_dim(self) -> int:
        return self.num_rows

    def _dense_coords(self, major: np.ndarray, minor: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        return minor, major

    @property
    def col_offsets(self) -> np.ndarray:
        """Column pointer array (length num_cols + 1)."""
        return self.major_offsets

    @property
    def row_indices(self) -> np.ndarray:
        """Row index of each stored entry."""
        return self.minor_indices

    # scipy-style names
    indptr = col_offsets
    indices = row_indices

    def get_col(self, j: int) -> Tuple[np.ndarray, np.ndarray]:
        """Row indices and values of column ``j``."""
        return self.major_slice(j)


# Alias
CSC = CSCMatrix
