from __future__ import annotations

import locale
from contextlib import contextmanager
from dataclasses import dataclass

from splot.core.defaults import INVARIANT_CULTURE_NAME


@dataclass(frozen=True)
class Culture:
    """Number formatting conventions of a locale.

    Parameters
    ----------
    name : :any:`str`
        Locale name such as ``'de-DE'``; empty for the invariant culture.
    decimal_separator : :any:`str`, default='.'
        Separator between integer and fractional digits.
    group_separator : :any:`str`, default=','
        Thousands separator, used when a format spec asks for grouping.

    Raises
    ------
    TypeError
        If one of the attributes is not a string.
    ValueError
        If the decimal separator is empty or equal to the group separator.
    """

    name: str
    decimal_separator: str = '.'
    group_separator: str = ','

    def __post_init__(self):
        for attr in ('name', 'decimal_separator', 'group_separator'):
            if not isinstance(getattr(self, attr), str):
                raise TypeError(
                    f'"{attr}" must be str, got '
                    f'{type(getattr(self, attr)).__name__}'
                )
        if not self.decimal_separator:
            raise ValueError('"decimal_separator" must not be empty.')
        if self.decimal_separator == self.group_separator:
            raise ValueError(
                '"decimal_separator" and "group_separator" must differ.'
            )

    @classmethod
    def get(cls, name: str) -> Culture:
        """Look up one of the registered cultures by name.

        Raises
        ------
        KeyError
            If no culture with that name is registered.
        """
        try:
            return CULTURES[name]
        except KeyError:
            raise KeyError(f'Unknown culture: {name!r}') from None

    @classmethod
    def from_locale(cls) -> Culture:
        """Build a culture from the C library's current numeric locale.

        Reads the locale through :py:func:`locale.localeconv` and queries
        the name with :py:func:`locale.setlocale` without a locale argument,
        so the process locale is never changed.
        """
        conv = locale.localeconv()
        name = locale.setlocale(locale.LC_NUMERIC) or INVARIANT_CULTURE_NAME
        decimal = conv.get('decimal_point') or '.'
        group = conv.get('thousands_sep') or ''
        if name in ('C', 'POSIX'):
            name = INVARIANT_CULTURE_NAME
        if group == decimal:
            group = ''
        return cls(name, decimal, group)

    def __str__(self):
        return self.name or 'invariant'


INVARIANT = Culture(INVARIANT_CULTURE_NAME)

CULTURES = {
    INVARIANT.name: INVARIANT,
    'en-US': Culture('en-US', '.', ','),
    'de-DE': Culture('de-DE', ',', '.'),
    'fr-FR': Culture('fr-FR', ',', '\u202f'),
}

_current = INVARIANT


def current_culture() -> Culture:
    """Return the process-wide current culture."""
    return _current


def set_current_culture(culture: Culture | str) -> Culture:
    """Replace the process-wide current culture.

    Parameters
    ----------
    culture : :any:`Culture` | :any:`str`
        The new culture or the name of a registered one.

    Returns
    -------
    :any:`Culture`
        The previous culture.
    """
    global _current
    if isinstance(culture, str):
        culture = Culture.get(culture)
    if not isinstance(culture, Culture):
        raise TypeError(
            f'"culture" must be Culture or str, got '
            f'{type(culture).__name__}'
        )
    previous, _current = _current, culture
    return previous


@contextmanager
def use_culture(culture: Culture | str):
    """Temporarily switch the process-wide current culture."""
    previous = set_current_culture(culture)
    try:
        yield current_culture()
    finally:
        set_current_culture(previous)
