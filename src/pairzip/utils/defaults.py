from typing import Any

import numpy as np
import torch

# value-like kinds whose no-argument constructor gives the empty value
_VALUE_TYPES = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    tuple,
    list,
    dict,
    set,
    frozenset,
)


def default_for(sample: Any) -> Any:
    """
    The zero/empty value of the same kind as `sample`, used as a stand-in for
    an element a shorter sequence does not have.

      - Tensor -> zeros of the same shape, dtype and device
      - ndarray -> zeros of the same shape and dtype
      - numpy scalar -> zero of the same dtype
      - builtin value or container (int, str, list, ...) -> type(sample)()
      - anything else, None included -> None

    Constructors of other classes are never called.

    Args:
        sample: An element previously seen on the side being padded.

    Returns:
        The placeholder value. A fresh object for every call.
    """
    if isinstance(sample, torch.Tensor):
        return torch.zeros_like(sample)

    if isinstance(sample, np.ndarray):
        return np.zeros_like(sample)

    if isinstance(sample, np.generic):
        # np.void and friends have no empty form
        try:
            return type(sample)()
        except (TypeError, ValueError):
            return None

    # exact match: subclasses (IntEnum, namedtuple, ...) are user types
    if type(sample) in _VALUE_TYPES:
        return type(sample)()

    return None
