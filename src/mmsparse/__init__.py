"""
mmsparse - MatrixMarket to compressed sparse matrices

Decodes coordinate MatrixMarket files (real / integer / pattern values,
general / symmetric storage) into CSR or CSC arrays:

- Strict header and data-line validation with coded errors
- Symmetric files expanded to both triangles
- Stable (major, minor) ordering; duplicate coordinates kept, not summed
- Configurable coordinate and value dtypes

Modules:
- io: Tokenizer, header parser, coordinate reader, compressor, entry points
- sparse: CSRMatrix / CSCMatrix result containers
- error: Error codes and exception hierarchy

Architecture:
    ┌──────────────────────────────────────────────┐
    │   decode_as_row_major / decode_as_column_major│
    ├──────────────────────────────────────────────┤
    │  read_header -> read_coordinates -> compress  │
    ├──────────────────────────────────────────────┤
    │        CSRMatrix / CSCMatrix (numpy)          │
    └──────────────────────────────────────────────┘

Example:
    >>> import mmsparse
    >>> csr = mmsparse.decode_as_row_major("matrix.mtx")
    >>> csr.row_offsets, csr.col_indices, csr.values
    >>>
    >>> # Choose widths per call ...
    >>> csc = mmsparse.decode_as_column_major("matrix.mtx",
    ...                                       index_dtype="int32",
    ...                                       value_dtype="float32")
    >>>
    >>> # ... or globally
    >>> mmsparse.set_precision(index="int32", value="float32")
"""

__version__ = '0.1.0'

# Import main modules
from . import error
from . import io
from . import sparse

# Re-export common types
from ._dtypes import (
    DType,
    float16,
    float32,
    float64,
    int8,
    int16,
    int32,
    int64,
    uint8,
    uint16,
    uint32,
    uint64,
)

from ._config import (
    IndexType,
    ValueType,
    MMSparseConfig,
    config,
    get_config,
    set_precision,
    get_precision,
    set_encoding,
)

from .error import (
    MMSparseError,
    MatrixMarketIOError,
    FormatError,
    MalformedNumberError,
    IndexOverflowError,
)

from .sparse import (
    SparseFormat,
    CompressedMatrix,
    CSRMatrix,
    CSCMatrix,
)

from .io import (
    Symmetry,
    ValueFormat,
    MatrixMarketHeader,
    read_header,
    decode,
    decode_stream,
    decode_as_row_major,
    decode_as_column_major,
    read_csr,
    read_csc,
)

__all__ = [
    # Version
    '__version__',

    # Modules
    'error',
    'io',
    'sparse',

    # Type constants
    'DType',
    'float16',
    'float32',
    'float64',
    'int8',
    'int16',
    'int32',
    'int64',
    'uint8',
    'uint16',
    'uint32',
    'uint64',

    # Configuration
    'IndexType',
    'ValueType',
    'MMSparseConfig',
    'config',
    'get_config',
    'set_precision',
    'get_precision',
    'set_encoding',

    # Errors
    'MMSparseError',
    'MatrixMarketIOError',
    'FormatError',
    'MalformedNumberError',
    'IndexOverflowError',

    # Matrices
    'SparseFormat',
    'CompressedMatrix',
    'CSRMatrix',
    'CSCMatrix',

    # Decoding
    'Symmetry',
    'ValueFormat',
    'MatrixMarketHeader',
    'read_header',
    'decode',
    'decode_stream',
    'decode_as_row_major',
    'decode_as_column_major',
    'read_csr',
    'read_csc',
]
