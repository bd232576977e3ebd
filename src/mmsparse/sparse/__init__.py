"""mmsparse Sparse Matrix Module.

Result containers produced by the MatrixMarket decoder.

Type Hierarchy:

    CompressedMatrix
    ├── CSRMatrix      # row_offsets, col_indices, values
    └── CSCMatrix      # col_offsets, row_indices, values

Key Classes:
    - CSRMatrix / CSCMatrix: owned numpy arrays, invariant validation,
      dense and scipy conversion
"""

from ._base import (
    SparseFormat,
    CompressedMatrix,
)

from ._csr import (
    CSRMatrix,
    CSR,
)

from ._csc import (
    CSCMatrix,
    CSC,
)

__all__ = [
    'SparseFormat',
    'CompressedMatrix',
    'CSRMatrix',
    'CSR',
    'CSCMatrix',
    'CSC',
]
