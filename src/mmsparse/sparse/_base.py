"""
Compressed Sparse Matrix Base Class

This module defines the shared container for the two compressed layouts
produced by the MatrixMarket decoder.

Type Hierarchy:

    CompressedMatrix
    ├── CSRMatrix - major axis = rows    (row_offsets, col_indices)
    └── CSCMatrix - major axis = columns (col_offsets, row_indices)

Layout:

    major_offsets  length major_dim + 1, non-decreasing, [0 .. nnz]
    minor_indices  length nnz, ascending within each major slice
    values         length nnz

Duplicate coordinates from the source file are kept as separate entries
(in file order) rather than summed. ``to_dense`` and ``to_scipy`` consumers
see them accumulated, since both sum duplicates.
"""

from typing import Any, Tuple

import numpy as np

__all__ = [
    'SparseFormat',
    'CompressedMatrix',
]


class SparseFormat:
    """Enumeration of sparse matrix formats."""
    CSR = 'csr'
    CSC = 'csc'


class CompressedMatrix:
    """
    Compressed sparse matrix (CSR or CSC) owning three numpy arrays.

    Subclasses fix the major axis. Instances are plain containers: they hold
    no reference to the file or to any decoder state.

    Attributes:
        num_rows: Number of rows
        num_cols: Number of columns
        num_nonzeros: Stored entries (after symmetric expansion)
        major_offsets: Offsets into minor_indices/values per major index
        minor_indices: Minor-axis index of every stored entry
        values: Value of every stored entry
    """

    format: str = ''

    __slots__ = ('num_rows', 'num_cols', 'num_nonzeros',
                 'major_offsets', 'minor_indices', 'values')

    def __init__(
        self,
        num_rows: int,
        num_cols: int,
        num_nonzeros: int,
        major_offsets: np.ndarray,
        minor_indices: np.ndarray,
        values: np.ndarray,
    ):
        self.num_rows = int(num_rows)
        self.num_cols = int(num_cols)
        self.num_nonzeros = int(num_nonzeros)
        self.major_offsets = np.asarray(major_offsets)
        self.minor_indices = np.asarray(minor_indices)
        self.values = np.asarray(values)

    # =========================================================================
    # Axis Mapping (subclasses)
    # =========================================================================

    @property
    def major_dim(self) -> int:
        """Length of the major axis (rows for CSR, columns for CSC)."""
        raise NotImplementedError

    @property
    def minor_dim(self) -> int:
        """Length of the minor axis."""
        raise NotImplementedError

    def _dense_coords(self, major: np.ndarray, minor: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Map (major, minor) index arrays to (row, col)."""
        raise NotImplementedError

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        """Matrix dimensions (rows, cols)."""
        return (self.num_rows, self.num_cols)

    @property
    def nnz(self) -> int:
        """Number of stored entries (alias of num_nonzeros)."""
        return self.num_nonzeros

    @property
    def dtype(self) -> np.dtype:
        """Value dtype."""
        return self.values.dtype

    @property
    def index_dtype(self) -> np.dtype:
        """Coordinate dtype of offsets and indices."""
        return self.minor_indices.dtype

    # =========================================================================
    # Access
    # =========================================================================

    def major_slice(self, i: int) -> Tuple[np.ndarray, np.ndarray]:
        """Minor indices and values stored for major index ``i``.

        Returns views into the matrix arrays.
        """
        if i < 0:
            i += self.major_dim
        if not 0 <= i < self.major_dim:
            raise IndexError(f"index {i} out of range for axis of length {self.major_dim}")
        start = int(self.major_offsets[i])
        end = int(self.major_offsets[i + 1])
        return self.minor_indices[start:end], self.values[start:end]

    def major_lengths(self) -> np.ndarray:
        """Number of stored entries per major index."""
        return np.diff(self.major_offsets.astype(np.int64))

    def validate(self) -> None:
        """Check the compressed layout invariants.

        Raises:
            ValueError: If any invariant does not hold
        """
        offsets = self.major_offsets.astype(np.int64)
        nnz = self.num_nonzeros
        if len(offsets) != self.major_dim + 1:
            raise ValueError(
                f"major_offsets has length {len(offsets)}, expected {self.major_dim + 1}"
            )
        if offsets[0] != 0:
            raise ValueError(f"major_offsets[0] is {offsets[0]}, expected 0")
        if offsets[-1] != nnz:
            raise ValueError(f"major_offsets[-1] is {offsets[-1]}, expected nnz={nnz}")
        if np.any(np.diff(offsets) < 0):
            raise ValueError("major_offsets is not non-decreasing")
        if len(self.minor_indices) != nnz or len(self.values) != nnz:
            raise ValueError(
                f"minor_indices/values lengths ({len(self.minor_indices)}, "
                f"{len(self.values)}) do not match nnz={nnz}"
            )
        if nnz:
            minor = self.minor_indices.astype(np.int64)
            if minor.min() < 0 or minor.max() >= self.minor_dim:
                raise ValueError(f"minor index out of range [0, {self.minor_dim})")
            for i in range(self.major_dim):
                seg = minor[offsets[i]:offsets[i + 1]]
                if len(seg) > 1 and np.any(np.diff(seg) < 0):
                    raise ValueError(f"minor indices of slice {i} are not sorted")

    # =========================================================================
    # Conversion
    # =========================================================================

    def _major_expanded(self) -> np.ndarray:
        """Major index of every stored entry."""
        return np.repeat(np.arange(self.major_dim, dtype=np.intp), self.major_lengths())

    def to_coo(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """(rows, cols, values) of every stored entry in storage order."""
        rows, cols = self._dense_coords(self._major_expanded(), self.minor_indices.astype(np.intp))
        return rows, cols, self.values

    def to_dense(self) -> np.ndarray:
        """Dense 2D array; duplicate entries are summed."""
        dense = np.zeros(self.shape, dtype=self.dtype)
        rows, cols, values = self.to_coo()
        np.add.at(dense, (rows, cols), values)
        return dense

    def to_scipy(self) -> Any:
        """Convert to the matching scipy.sparse matrix (csr_matrix/csc_matrix)."""
        try:
            import scipy.sparse as sp
        except ImportError:
            raise ImportError("scipy required for to_scipy()")

        ctor = sp.csr_matrix if self.format == SparseFormat.CSR else sp.csc_matrix
        return ctor(
            (self.values, self.minor_indices, self.major_offsets),
            shape=self.shape,
        )

    # =========================================================================
    # Dunder
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompressedMatrix) or other.format != self.format:
            return NotImplemented
        return (
            self.shape == other.shape
            and self.num_nonzeros == other.num_nonzeros
            and np.array_equal(self.major_offsets, other.major_offsets)
            and np.array_equal(self.minor_indices, other.minor_indices)
            and np.array_equal(self.values, other.values)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shape={self.shape}, nnz={self.nnz}, "
            f"dtype={self.dtype}, index_dtype={self.index_dtype})"
        )
