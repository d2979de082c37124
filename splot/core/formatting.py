import re
from collections.abc import Mapping
from numbers import Number
from string import Formatter

from splot.core.culture import Culture


_SPEC_PATTERN = re.compile(
    r'(?:(?P<fill>.)?(?P<align>[<>=^]))?'
    r'(?P<sign>[-+ ]?z?#?)0?(?P<width>\d*)(?P<tail>.*)',
    re.DOTALL
)


class _Missing:
    """Placeholder for a named field the item does not provide."""

    def __repr__(self):
        return '<missing>'


_MISSING = _Missing()


class CultureFormatter(Formatter):
    """A :py:class:`string.Formatter` that reads named fields from an item
    and applies the separators of a :py:class:`Culture` to numbers.

    Positional fields (``{0}``, ``{1:.2f}``, ``{}``) refer to the values
    passed to :py:meth:`format_item`. Named fields (``{Title}``,
    ``{x:.1f}``) read the attribute (or mapping key) of the item. A named
    field the item does not have is rendered as an empty string.

    Parameters
    ----------
    culture : :any:`Culture`
        Culture whose decimal and group separators are used.
    """

    def __init__(self, culture: Culture):
        super().__init__()
        if not isinstance(culture, Culture):
            raise TypeError(
                f'"culture" must be Culture, got {type(culture).__name__}'
            )
        self._culture = culture
        self._separators = str.maketrans({
            '.': culture.decimal_separator,
            ',': culture.group_separator,
        })

    def format_item(self, template: str, item, *values) -> str:
        if not isinstance(template, str):
            raise TypeError(
                f'"template" must be str, got {type(template).__name__}'
            )
        return self.vformat(template, values, {'item': item})

    def get_field(self, field_name, args, kwargs):
        if field_name[:1].isdigit() or not field_name:
            return super().get_field(field_name, args, kwargs)
        try:
            return super().get_field(field_name, args, kwargs)
        except (AttributeError, KeyError):
            return _MISSING, field_name

    def get_value(self, key, args, kwargs):
        if isinstance(key, int):
            return args[key]
        item = kwargs['item']
        if item is None:
            raise AttributeError(key)
        if isinstance(item, Mapping):
            return item[key]
        return getattr(item, key)

    def convert_field(self, value, conversion):
        if value is _MISSING:
            return value
        return super().convert_field(value, conversion)

    def format_field(self, value, format_spec):
        if value is _MISSING:
            return ''
        if not isinstance(value, Number) or isinstance(value, bool):
            return format(value, format_spec)

        spec = _SPEC_PATTERN.fullmatch(format_spec)
        if spec is None or not spec.group('align'):
            # zero padding only adds digits and group separators
            return format(value, format_spec).translate(self._separators)

        # localise the number first so the fill characters stay untouched
        number = format(
            value, spec.group('sign') + spec.group('tail')
        ).translate(self._separators)
        fill = spec.group('fill') or ' '
        width = int(spec.group('width') or 0)
        if len(number) >= width:
            return number
        if spec.group('align') == '=':
            sign = number[:1] if number[:1] in '+- ' else ''
            digits = number[len(sign):]
            return sign + digits.rjust(width - len(sign), fill)
        return format(number, f'{fill}{spec.group("align")}{width}')

    @property
    def culture(self) -> Culture:
        return self._culture


def format_string(culture: Culture, template: str, item, *values) -> str:
    """Format ``template`` with ``item`` and ``values`` using ``culture``.

    Parameters
    ----------
    culture : :any:`Culture`
        Culture providing the number separators.
    template : :any:`str`
        Template in :py:meth:`str.format` syntax.
    item : :any:`object`
        Source of named fields, may be ``None``.
    *values
        Values of the positional fields.

    Returns
    -------
    :any:`str`
        The formatted text.

    Raises
    ------
    ValueError
        If the template is malformed.
    IndexError
        If a positional field has no matching value.

    Examples
    --------
    >>> from splot.core import Culture, format_string
    >>> format_string(Culture.get('de-DE'), '{0:,.2f}', None, 1234.5)
    '1.234,50'
    """
    return CultureFormatter(culture).format_item(template, item, *values)
