"""
Global configuration for mmsparse.

Provides:
- Default precision settings (coordinate type, value type)
- Text encoding used to open MatrixMarket files
- Thread-local overrides via ``config.local(...)``
"""

from __future__ import annotations

import codecs
import logging
import threading
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np

logger = logging.getLogger("mmsparse.config")


# =============================================================================
# Precision Types
# =============================================================================

class IndexType(Enum):
    """Coordinate (integer) precision."""
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(self.value)


class ValueType(Enum):
    """Value (numeric) precision."""
    FLOAT16 = "float16"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(self.value)


_INDEX_ALIASES = {
    "i8": "int8", "i16": "int16", "i32": "int32", "i64": "int64",
    "u8": "uint8", "u16": "uint16", "u32": "uint32", "u64": "uint64",
}
_VALUE_ALIASES = dict(_INDEX_ALIASES, f16="float16", f32="float32", f64="float64")


def _coerce_index(value: Union[IndexType, str, Any]) -> IndexType:
    if isinstance(value, IndexType):
        return value
    if not isinstance(value, str):
        value = np.dtype(value).name
    value = value.strip().lower()
    try:
        return IndexType(_INDEX_ALIASES.get(value, value))
    except ValueError:
        raise ValueError(
            f"Invalid index type: {value!r}. Valid: {[t.value for t in IndexType]}"
        ) from None


def _coerce_value(value: Union[ValueType, str, Any]) -> ValueType:
    if isinstance(value, ValueType):
        return value
    if not isinstance(value, str):
        value = np.dtype(value).name
    value = value.strip().lower()
    try:
        return ValueType(_VALUE_ALIASES.get(value, value))
    except ValueError:
        raise ValueError(
            f"Invalid value type: {value!r}. Valid: {[t.value for t in ValueType]}"
        ) from None


def _coerce_encoding(value: str) -> str:
    # Raises LookupError for unknown codecs
    return codecs.lookup(value).name


# =============================================================================
# Global Configuration Manager
# =============================================================================

class MMSparseConfig:
    """
    Global configuration manager for mmsparse.

    Provides thread-local configuration with context manager support.
    Configuration can be set globally or locally within a context.

    Example:
        # Global configuration
        mmsparse.config.default_index = "int32"

        # Local configuration (context manager)
        with mmsparse.config.local(value="float32"):
            csr = mmsparse.decode_as_row_major("m.mtx")
        # Back to global config
    """

    _KEYS = ("index", "value", "encoding")

    def __init__(self):
        self._local = threading.local()
        self.reset()

    # -------------------------------------------------------------------------
    # Property Accessors (with thread-local override support)
    # -------------------------------------------------------------------------

    def _local_value(self, key: str) -> Any:
        return getattr(self._local, key, None)

    @property
    def default_index(self) -> IndexType:
        """Get default coordinate type."""
        local = self._local_value("index")
        return local if local is not None else self._global_index

    @default_index.setter
    def default_index(self, value: Union[IndexType, str]):
        """Set global default coordinate type."""
        self._global_index = _coerce_index(value)
        logger.debug(f"Default coordinate type set to {self._global_index.value}")

    @property
    def default_value(self) -> ValueType:
        """Get default value type."""
        local = self._local_value("value")
        return local if local is not None else self._global_value

    @default_value.setter
    def default_value(self, value: Union[ValueType, str]):
        """Set global default value type."""
        self._global_value = _coerce_value(value)
        logger.debug(f"Default value type set to {self._global_value.value}")

    @property
    def encoding(self) -> str:
        """Text encoding used to open MatrixMarket files."""
        local = self._local_value("encoding")
        return local if local is not None else self._global_encoding

    @encoding.setter
    def encoding(self, value: str):
        self._global_encoding = _coerce_encoding(value)
        logger.debug(f"Default encoding set to {self._global_encoding}")

    # -------------------------------------------------------------------------
    # Context Manager Support
    # -------------------------------------------------------------------------

    def local(self, **kwargs) -> "_LocalConfigContext":
        """
        Create a local configuration context.

        Args:
            **kwargs: Configuration overrides (index, value, encoding)

        Returns:
            Context manager
        """
        unknown = set(kwargs) - set(self._KEYS)
        if unknown:
            raise TypeError(f"Unknown configuration keys: {sorted(unknown)}")
        coerced = {}
        if kwargs.get("index") is not None:
            coerced["index"] = _coerce_index(kwargs["index"])
        if kwargs.get("value") is not None:
            coerced["value"] = _coerce_value(kwargs["value"])
        if kwargs.get("encoding") is not None:
            coerced["encoding"] = _coerce_encoding(kwargs["encoding"])
        return _LocalConfigContext(self, **coerced)

    def _get_local(self, keys: List[str]) -> Dict[str, Any]:
        return {key: self._local_value(key) for key in keys}

    def _set_local(self, **kwargs):
        """Set thread-local configuration."""
        for key, value in kwargs.items():
            setattr(self._local, key, value)

    # -------------------------------------------------------------------------
    # Reset / Serialization
    # -------------------------------------------------------------------------

    def reset(self):
        """Reset global configuration to defaults."""
        self._global_index = IndexType.INT64
        self._global_value = ValueType.FLOAT64
        self._global_encoding = "utf-8"

    def to_dict(self) -> Dict[str, Any]:
        """Export the effective configuration as dictionary."""
        return {
            "index": self.default_index.value,
            "value": self.default_value.value,
            "encoding": self.encoding,
        }

    def __repr__(self) -> str:
        return f"MMSparseConfig({self.to_dict()})"


class _LocalConfigContext:
    """Context manager for local configuration override."""

    def __init__(self, config: MMSparseConfig, **kwargs):
        self._config = config
        self._kwargs = kwargs
        self._saved: Dict[str, Any] = {}

    def __enter__(self):
        # Saved so nested contexts restore the outer override
        self._saved = self._config._get_local(list(self._kwargs))
        self._config._set_local(**self._kwargs)
        return self._config

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._config._set_local(**self._saved)
        return False


# =============================================================================
# Global Instance
# =============================================================================

config = MMSparseConfig()


# =============================================================================
# Convenience Functions
# =============================================================================

def get_config() -> MMSparseConfig:
    """Get the global configuration instance."""
    return config


def set_precision(
    index: Optional[Union[IndexType, str]] = None,
    value: Optional[Union[ValueType, str]] = None,
) -> None:
    """
    Set default precision for decoding.

    Args:
        index: Coordinate type, any integer width ('int8' .. 'uint64', 'i32', ...)
        value: Value type, any integer or float width ('float16', 'f32', 'i64', ...)

    Example:
        >>> mmsparse.set_precision(index='int32', value='float32')
    """
    if index is not None:
        config.default_index = index
    if value is not None:
        config.default_value = value


def get_precision() -> Tuple[IndexType, ValueType]:
    """
    Get current default precision.

    Returns:
        Tuple of (index_type, value_type)
    """
    return (config.default_index, config.default_value)


def set_encoding(encoding: str) -> None:
    """Set the text encoding used to open MatrixMarket files."""
    config.encoding = encoding


def _get_index_dtype() -> np.dtype:
    """Get NumPy dtype for current default coordinate type."""
    return config.default_index.numpy_dtype


def _get_value_dtype() -> np.dtype:
    """Get NumPy dtype for current default value type."""
    return config.default_value.numpy_dtype


__all__ = [
    "IndexType",
    "ValueType",
    "MMSparseConfig",
    "config",
    "get_config",
    "set_precision",
    "get_precision",
    "set_encoding",
]
