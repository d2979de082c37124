from collections.abc import Iterable, Mapping

import numpy as np

from splot.core.defaults import HASH_FACTOR, HASH_NAN, HASH_SEED, HASH_UNSET
from splot.core.unset import UNSET


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def value_hash(value) -> int:
    """Hash a single value, including the unhashable ones found in tags.

    Parameters
    ----------
    value : :any:`object`
        Any attribute value of a plot element.

    Returns
    -------
    :any:`int`
        A hash that is equal for equal values. Objects that are neither
        hashable nor containers fall back to their identity.
    """
    if value is None:
        return 0
    if value is UNSET:
        return HASH_UNSET
    if isinstance(value, (float, np.floating)) and np.isnan(value):
        return HASH_NAN
    if isinstance(value, np.ndarray):
        return hash((value.dtype.str, value.shape, value.tobytes()))
    if isinstance(value, (list, tuple)):
        return combine_hashes(value)
    if isinstance(value, Mapping):
        items = sorted(value.items(), key=lambda kv: repr(kv[0]))
        return combine_hashes(v for kv in items for v in kv)
    if isinstance(value, (set, frozenset)):
        return hash(frozenset(value_hash(v) for v in value))
    try:
        return hash(value)
    except TypeError:
        return id(value)


def combine_hashes(values: Iterable) -> int:
    r"""Combine the hashes of ``values`` in an order-sensitive way.

    Notes
    -----
    Starting from a seed of 17, every value is folded in with

    .. math::
        h \leftarrow 23 \cdot h + \operatorname{hash}(v)

    and the result is truncated to a signed 32 bit integer.

    Examples
    --------
    >>> from splot.core import combine_hashes
    >>> combine_hashes([1, 2]) != combine_hashes([2, 1])
    True
    """
    h = HASH_SEED
    for value in values:
        h = (h * HASH_FACTOR + value_hash(value)) & 0xFFFFFFFF
    return _to_int32(h)
