"""
Data Type Definitions

Provides the dtype constants accepted for coordinates and values, and the
validation that enforces "coordinates are integers, values are numeric".
"""

from typing import Union
from enum import Enum

import numpy as np

__all__ = [
    'DType', 'float16', 'float32', 'float64',
    'int8', 'int16', 'int32', 'int64', 'uint8', 'uint16', 'uint32', 'uint64',
    'INDEX_DTYPES', 'VALUE_DTYPES',
    'normalize_dtype', 'validate_index_dtype', 'validate_value_dtype',
    'is_float_dtype', 'is_int_dtype',
]


class DType(Enum):
    """
    mmsparse Data Type Enumeration.

    Example:
        >>> from mmsparse import decode_as_row_major, DType
        >>> csr = decode_as_row_major("m.mtx", index_dtype=DType.int32,
        ...                           value_dtype=DType.float32)
    """

    float16 = 'float16'
    float32 = 'float32'
    float64 = 'float64'
    int8 = 'int8'
    int16 = 'int16'
    int32 = 'int32'
    int64 = 'int64'
    uint8 = 'uint8'
    uint16 = 'uint16'
    uint32 = 'uint32'
    uint64 = 'uint64'

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"DType.{self.name}"

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(self.value)


# =============================================================================
# Module-Level Constants (For Clean Syntax)
# =============================================================================

float16 = DType.float16
float32 = DType.float32
float64 = DType.float64
int8 = DType.int8
int16 = DType.int16
int32 = DType.int32
int64 = DType.int64
uint8 = DType.uint8
uint16 = DType.uint16
uint32 = DType.uint32
uint64 = DType.uint64

# Coordinate width must be an integer type
INDEX_DTYPES = frozenset({
    'int8', 'int16', 'int32', 'int64',
    'uint8', 'uint16', 'uint32', 'uint64',
})

# Value type must be real numeric (no bool, no complex)
VALUE_DTYPES = frozenset({'float16', 'float32', 'float64'}) | INDEX_DTYPES


# =============================================================================
# Type Utilities
# =============================================================================

DTypeLike = Union[str, DType, type, np.dtype]


def normalize_dtype(dtype: DTypeLike) -> str:
    """
    Normalize dtype to string.

    Args:
        dtype: String, DType enum, numpy dtype or numpy scalar type

    Returns:
        String dtype

    Example:
        >>> normalize_dtype(DType.float32)
        'float32'
        >>> normalize_dtype(np.int64)
        'int64'
    """
    if isinstance(dtype, DType):
        return dtype.value
    elif isinstance(dtype, str):
        return dtype
    elif isinstance(dtype, np.dtype):
        return dtype.name
    elif isinstance(dtype, type):
        # numpy scalar types and the builtins int/float/bool/complex
        return np.dtype(dtype).name
    else:
        raise TypeError(f"dtype must be str, DType or numpy dtype, got {type(dtype)}")


def validate_index_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Validate a coordinate dtype.

    Raises:
        TypeError: If dtype is not an integer type
        ValueError: If dtype is an integer type of unsupported width
    """
    name = normalize_dtype(dtype)
    if name in INDEX_DTYPES:
        return np.dtype(name)
    if is_float_dtype(name) or name in ('bool', 'complex64', 'complex128'):
        raise TypeError(f"Coordinate dtype must be an integer type, got {name}")
    raise ValueError(f"Invalid coordinate dtype: {name}. Valid: {sorted(INDEX_DTYPES)}")


def validate_value_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Validate a value dtype.

    Raises:
        TypeError: If dtype is not a real numeric type
        ValueError: If dtype is numeric but unsupported
    """
    name = normalize_dtype(dtype)
    if name in VALUE_DTYPES:
        return np.dtype(name)
    if name in ('bool', 'complex64', 'complex128'):
        raise TypeError(f"Value dtype must be a real numeric type, got {name}")
    raise ValueError(f"Invalid value dtype: {name}. Valid: {sorted(VALUE_DTYPES)}")


def is_float_dtype(dtype: DTypeLike) -> bool:
    """Check if dtype is floating point."""
    dtype_str = normalize_dtype(dtype)
    return dtype_str in ('float16', 'float32', 'float64')


def is_int_dtype(dtype: DTypeLike) -> bool:
    """Check if dtype is integer."""
    dtype_str = normalize_dtype(dtype)
    return dtype_str in ('int8', 'int16', 'int32', 'int64', 'uint8', 'uint16', 'uint32', 'uint64')
