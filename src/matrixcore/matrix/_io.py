"""
Matrix Serialization

JSON encoding that round-trips a matrix's family, shape, cell values and
label bindings.

Document Layout:

    {
        "family": "SparseRowMatrix",
        "shape": [rows, cols],
        "layout": "dense" | "coordinate",
        "cells": [[...], ...]           # dense: one list per row
               | [[row, col, value]...] # coordinate: non-zeros only
        "dtype": "float64",             # DenseMatrix only
        "row_labels": {"a": 0} | null,
        "column_labels": {"x": 1} | null
    }

Views are written under the family of their parent (``type(m.like(0, 0))``).
Custom backends join through ``register_family``; they must be
constructible as ``cls(rows, cols)``.
"""

import json
import logging
from typing import Any, Dict, Type

from ..error import CardinalityError, IndexOutOfBoundsError, MatrixFormatError
from ._base import MatrixBase, MatrixFormat
from ._dense import DenseMatrix
from ._sparse_column import SparseColumnMatrix
from ._sparse_row import SparseRowMatrix

logger = logging.getLogger("matrixcore.matrix.io")

__all__ = [
    'encode_matrix',
    'decode_matrix',
    'register_family',
]

_LAYOUT_DENSE = 'dense'
_LAYOUT_COORDINATE = 'coordinate'

_FAMILIES: Dict[str, Type[MatrixBase]] = {
    'DenseMatrix': DenseMatrix,
    'SparseRowMatrix': SparseRowMatrix,
    'SparseColumnMatrix': SparseColumnMatrix,
}


def register_family(cls: Type[MatrixBase]) -> Type[MatrixBase]:
    """Make ``cls`` decodable by name. Usable as a class decorator."""
    if not (isinstance(cls, type) and issubclass(cls, MatrixBase)):
        raise TypeError(f"Only MatrixBase subclasses can be registered, got {cls!r}")
    _FAMILIES[cls.__name__] = cls
    return cls


# =============================================================================
# Encoding
# =============================================================================

def encode_matrix(matrix: MatrixBase) -> str:
    """Serialize ``matrix`` to a JSON string."""
    family = type(matrix.like(0, 0))
    rows, cols = matrix.shape
    payload: Dict[str, Any] = {
        'family': family.__name__,
        'shape': [rows, cols],
    }
    if matrix.format == MatrixFormat.DENSE:
        payload['layout'] = _LAYOUT_DENSE
        payload['cells'] = [[matrix.get_quick(r, c) for c in range(cols)] for r in range(rows)]
    else:
        payload['layout'] = _LAYOUT_COORDINATE
        payload['cells'] = [[r, c, v] for r, c, v in matrix.iter_nonzero()]
    if isinstance(matrix, DenseMatrix):
        payload['dtype'] = str(matrix.dtype)
    payload['row_labels'] = matrix.row_label_bindings
    payload['column_labels'] = matrix.column_label_bindings
    logger.debug(f"Encoded {family.__name__} of shape {matrix.shape}")
    return json.dumps(payload)


# =============================================================================
# Decoding
# =============================================================================

def decode_matrix(text: str) -> MatrixBase:
    """Rebuild a matrix from ``encode_matrix`` output.

    Raises:
        MatrixFormatError: If the document is not valid JSON, names an
            unknown family, or has cells that do not fit its shape
    """
    try:
        payload = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise MatrixFormatError(f"Not a JSON matrix document: {e}") from e
    if not isinstance(payload, dict):
        raise MatrixFormatError("Matrix document must be a JSON object")

    try:
        family_name = payload['family']
        rows, cols = payload['shape']
        layout = payload['layout']
        cells = payload['cells']
    except (KeyError, TypeError, ValueError) as e:
        raise MatrixFormatError(f"Matrix document is missing a required field: {e}") from e

    family = _FAMILIES.get(family_name)
    if family is None:
        raise MatrixFormatError(f"Unknown matrix family {family_name!r}")

    try:
        if 'dtype' in payload and issubclass(family, DenseMatrix):
            matrix = family(rows, cols, dtype=payload['dtype'])
        else:
            matrix = family(rows, cols)
        if layout == _LAYOUT_DENSE:
            matrix.assign(cells)
        elif layout == _LAYOUT_COORDINATE:
            for row, col, value in cells:
                matrix.set(row, col, value)
        else:
            raise MatrixFormatError(f"Unknown cell layout {layout!r}")
        matrix.row_label_bindings = payload.get('row_labels')
        matrix.column_label_bindings = payload.get('column_labels')
    except (CardinalityError, IndexOutOfBoundsError, TypeError, ValueError) as e:
        if isinstance(e, MatrixFormatError):
            raise
        raise MatrixFormatError(f"Invalid {family_name} document for shape {rows}x{cols}: {e}") from e

    logger.debug(f"Decoded {family_name} of shape {matrix.shape}")
    return matrix
