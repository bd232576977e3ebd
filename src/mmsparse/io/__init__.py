"""MatrixMarket decoding.

Reads coordinate MatrixMarket files into CSR or CSC matrices.

Pipeline:

    Tokens                 split one line on a separator
    read_header            banner + size line -> MatrixMarketHeader
    read_coordinates       data lines -> CoordinateList (symmetry expanded)
    compress               stable (major, minor) sort -> CSRMatrix / CSCMatrix

Key Functions:
    - decode_as_row_major / decode_as_column_major: path -> CSR / CSC
    - decode, decode_stream: format chosen at call time
"""

from ._tokens import (
    Tokens,
    split_line,
)

from ._numbers import (
    parse_int,
    parse_index,
    parse_value,
)

from ._lines import (
    LineReader,
)

from ._header import (
    BANNER,
    Symmetry,
    ValueFormat,
    MatrixMarketHeader,
    parse_value_format,
    parse_symmetry,
    read_header,
)

from ._reader import (
    CoordinateList,
    read_coordinates,
)

from ._compress import (
    compress,
    compress_offsets,
    check_capacity,
)

from ._decode import (
    decode,
    decode_stream,
    decode_as_row_major,
    decode_as_column_major,
    read_csr,
    read_csc,
)

__all__ = [
    # Lexing
    'Tokens',
    'split_line',
    'LineReader',
    # Numbers
    'parse_int',
    'parse_index',
    'parse_value',
    # Header
    'BANNER',
    'Symmetry',
    'ValueFormat',
    'MatrixMarketHeader',
    'parse_value_format',
    'parse_symmetry',
    'read_header',
    # Coordinates
    'CoordinateList',
    'read_coordinates',
    # Compression
    'compress',
    'compress_offsets',
    'check_capacity',
    # Entry points
    'decode',
    'decode_stream',
    'decode_as_row_major',
    'decode_as_column_major',
    'read_csr',
    'read_csc',
]
