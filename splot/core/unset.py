from enum import Enum

from splot.core.defaults import HASH_UNSET


class Unset(Enum):
    """Marker for an element override that has not been set.

    ``UNSET`` is a dedicated singleton so that no valid value (``0``,
    ``''``, ``NaN``, ``None`` for a tag) can be mistaken for "not set".
    """

    UNSET = 'UNSET'

    def __repr__(self):
        return 'UNSET'

    def __bool__(self):
        return False

    def __hash__(self):
        return HASH_UNSET


UNSET = Unset.UNSET


def is_set(value) -> bool:
    return value is not UNSET
