"""
Global configuration for matrixcore.

Provides:
- Default precision for newly allocated dense storage
- Threshold above which cofactor-expansion determinants log a warning
- Environment overrides read once at import time

Environment:
    MATRIXCORE_PRECISION: ``f32``, ``f64``, ``float32`` or ``float64``
    MATRIXCORE_DETERMINANT_WARN_ORDER: integer matrix order
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Union

import numpy as np

logger = logging.getLogger("matrixcore.config")

__all__ = [
    'RealType',
    'get_config',
    'set_precision',
    'get_precision',
]


# =============================================================================
# Precision Types
# =============================================================================

class RealType(Enum):
    """Real (floating-point) precision."""
    FLOAT32 = "f32"
    FLOAT64 = "f64"

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(np.float32) if self == RealType.FLOAT32 else np.dtype(np.float64)

    @classmethod
    def parse(cls, value: Union["RealType", str]) -> "RealType":
        """Accept a RealType or any of ``f32``, ``f64``, ``float32``, ``float64``."""
        if isinstance(value, RealType):
            return value
        text = str(value).strip().lower()
        if text in ('f32', 'float32', 'single'):
            return cls.FLOAT32
        if text in ('f64', 'float64', 'double'):
            return cls.FLOAT64
        raise ValueError(f"Unsupported precision: {value!r}. "
                         f"Supported: f32, f64, float32, float64")


# =============================================================================
# Global Configuration State
# =============================================================================

_DEFAULT_DETERMINANT_WARN_ORDER = 9


class _Config:
    """
    Global configuration singleton.
    """

    def __init__(self):
        self._default_real = RealType.FLOAT64
        self._determinant_warn_order = _DEFAULT_DETERMINANT_WARN_ORDER
        self._load_environment()

    def _load_environment(self) -> None:
        precision = os.environ.get('MATRIXCORE_PRECISION')
        if precision:
            self._default_real = RealType.parse(precision)

        warn_order = os.environ.get('MATRIXCORE_DETERMINANT_WARN_ORDER')
        if warn_order:
            self.determinant_warn_order = int(warn_order)

    @property
    def default_real(self) -> RealType:
        """Precision used for new dense storage."""
        return self._default_real

    @default_real.setter
    def default_real(self, value: Union[RealType, str]):
        self._default_real = RealType.parse(value)

    @property
    def default_dtype(self) -> np.dtype:
        """NumPy dtype for the current default precision."""
        return self._default_real.numpy_dtype

    @property
    def determinant_warn_order(self) -> int:
        """Matrix order above which ``determinant()`` logs a warning."""
        return self._determinant_warn_order

    @determinant_warn_order.setter
    def determinant_warn_order(self, value: int):
        if value < 0:
            raise ValueError(f"determinant_warn_order must be non-negative, got {value}")
        self._determinant_warn_order = int(value)


_config = _Config()


# =============================================================================
# Public API
# =============================================================================

def get_config() -> _Config:
    """Get global configuration instance."""
    return _config


def set_precision(real: Union[RealType, str]) -> None:
    """
    Set default precision for new dense storage.

    Args:
        real: Real type ('float32', 'float64', 'f32', 'f64')

    Example:
        >>> matrixcore.set_precision('float32')
        >>> DenseMatrix(3, 3).dtype
        dtype('float32')
    """
    _config.default_real = real
    logger.info(f"Default precision set to {_config.default_real.value}")


def get_precision() -> RealType:
    """Get current default precision."""
    return _config.default_real


def _get_real_dtype() -> np.dtype:
    """Get NumPy dtype for current default real type."""
    return _config.default_dtype
