"""
Miscellaneous things not depending on anything else from sklearn_drsa.
"""

import operator

import numpy as np

from sklearn_drsa.exceptions import NullArgumentError


def check_not_none(value, message: str):
    """:return: `value`, after making sure it is not None.
    :raise NullArgumentError: with `message`, if `value is None`.
    """
    if value is None:
        raise NullArgumentError(message)
    return value


def check_index(index, size: int, what: str = 'index') -> int:
    """Validate `index` as a position into a sequence of length `size`.

    Unlike python sequences, negative indices are rejected, objects and
    attributes are addressed by dense zero-based indices only.

    :return: `index` as python int.
    :raise IndexError: if `index` is not within `[0, size)`.
    """
    check_not_none(index, "%s is None." % what)
    index = operator.index(index)  # accepts np.integer, rejects float
    if not 0 <= index < size:
        raise IndexError("%s %d out of range [0, %d)." % (what, index, size))
    return index


def sign(x) -> int:
    """`(x > 0) - (x < 0)`, i.e. -1, 0 or 1."""
    return (x > 0) - (x < 0)


def truncating_half(total: int) -> int:
    """:return: `total / 2` rounded towards zero (not towards -inf like `//`).
    """
    half = abs(total) // 2
    return half if total >= 0 else -half


def build_active_mask(which_attributes, n_attributes: int
                      ) -> np.ndarray or None:
    """:return: A mask array of length `n_attributes` based on
        `which_attributes`, True for active (condition) attributes.
        Returns None if `which_attributes` cannot be recognized.

    - None or 'all': All attributes are active.
    - array of indices: Array of active attribute indices.
    - mask: Array of length n_attributes and with dtype=bool.
    """
    if which_attributes is None:
        return np.ones(n_attributes, dtype=bool)
    if isinstance(which_attributes, str):
        if which_attributes == 'all':
            return np.ones(n_attributes, dtype=bool)
        return None
    which_attributes = np.asarray(which_attributes)
    active_mask_ = np.zeros(n_attributes, dtype=bool)  # default "all False"
    if not len(which_attributes):
        pass  # keep default
    elif which_attributes.dtype == bool:
        if which_attributes.shape != (n_attributes,):
            return None
        active_mask_[:] = which_attributes
    elif np.issubdtype(which_attributes.dtype, np.integer):
        if which_attributes.min() < 0 \
                or which_attributes.max() >= n_attributes:
            return None
        active_mask_[which_attributes] = True
    else:
        return None
    return active_mask_
