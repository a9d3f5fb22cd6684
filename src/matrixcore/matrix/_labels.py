"""Label bindings: optional ``str -> index`` maps for rows and columns.

A matrix starts with no maps at all (``None``). The first labelled write
allocates one; lookups against a missing map or an unknown key raise
UnboundLabelError.
"""

import logging
import numbers
from typing import Dict, Mapping, Optional

from ..error import UnboundLabelError, check_index

logger = logging.getLogger("matrixcore.matrix.labels")

__all__ = [
    'LabelBindings',
    'bind_label',
    'resolve_label',
    'copy_bindings',
    'validate_bindings',
]

LabelBindings = Dict[str, int]


def bind_label(bindings: Optional[LabelBindings], label: str, index: int) -> LabelBindings:
    """Bind ``label -> index``, allocating the map when absent.

    Returns:
        The map that now holds the binding (new or ``bindings`` itself)
    """
    if not isinstance(label, str):
        raise TypeError(f"Labels must be str, got {type(label).__name__}")
    if bindings is None:
        bindings = {}
    bindings[label] = index
    logger.debug(f"Bound label {label!r} -> {index}")
    return bindings


def resolve_label(bindings: Optional[LabelBindings], label: str) -> int:
    """Look up ``label``.

    Raises:
        UnboundLabelError: If there is no map or the label is not in it
    """
    if bindings is None:
        raise UnboundLabelError()
    try:
        return bindings[label]
    except KeyError:
        raise UnboundLabelError(label) from None


def copy_bindings(bindings: Optional[LabelBindings]) -> Optional[LabelBindings]:
    """New map with the same pairs, or None."""
    return None if bindings is None else dict(bindings)


def validate_bindings(bindings: Optional[Mapping[str, int]], cardinality: int) -> Optional[LabelBindings]:
    """Check a whole map before it replaces an existing one.

    Keys must be str and values integer indices in ``[0, cardinality)``.

    Returns:
        A fresh dict with the validated pairs, or None
    """
    if bindings is None:
        return None
    result: LabelBindings = {}
    for label, index in bindings.items():
        if not isinstance(label, str):
            raise TypeError(f"Labels must be str, got {type(label).__name__}")
        if not isinstance(index, numbers.Integral) or isinstance(index, bool):
            raise TypeError(f"Label {label!r} must map to an int, got {type(index).__name__}")
        check_index(int(index), cardinality)
        result[label] = int(index)
    return result
