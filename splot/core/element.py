from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any

from splot.core.color import Color
from splot.core.culture import Culture, current_culture
from splot.core.defaults import DEFAULT_MODE
from splot.core.errors import NoDefaultAvailableError
from splot.core.font import (
    FontWeights, validate_font, validate_font_size, validate_font_weight
)
from splot.core.formatting import format_string
from splot.core.hashing import combine_hashes
from splot.core.style import text_style
from splot.core.unset import UNSET, Unset, is_set

if TYPE_CHECKING:
    from splot.core.model import PlotModel


class PlotElement:
    r"""Base class for all elements of a :py:class:`PlotModel`.

    A plot element stores optional text styling overrides. Every override
    that is not set is resolved against the parent plot model when the
    *actual* value is requested, so changing a model default changes all
    elements that do not override it.

    Parameters
    ----------
    font : :any:`str` | ``UNSET``, default=UNSET
        Font family. If unset, the model's ``default_font`` is used.
    font_size : :any:`float` | ``UNSET``, default=UNSET
        Font size in points. If unset, the model's ``default_font_size`` is
        used.
    font_weight : :any:`float`, default=FontWeights.NORMAL
        Font weight on the CSS scale. Not inherited from the model.
    text_color : :any:`Color` | :any:`str` | :any:`tuple`, \
            default=Color.AUTOMATIC
        Text color. :py:attr:`Color.AUTOMATIC` defers to the model's
        ``text_color``. Anything :py:meth:`Color.parse` accepts is
        converted.
    tag : :any:`object`, default=None
        Arbitrary user data, never interpreted by the element.
    tooltip : :any:`str`, default=None
        Tooltip text.

    Raises
    ------
    TypeError
        If an attribute has the wrong type.
    ValueError
        If an attribute has an invalid value, e.g. a NaN font size.

    Notes
    -----
    The owning model is only referenced weakly. Elements are attached with
    :py:meth:`PlotModel.add_element` and never own their model.

    :py:meth:`element_hash_code` hashes the attributes listed in
    :py:attr:`HASH_FIELDS` in order. Subclasses append their own public
    attributes:

    >>> from splot.core import PlotElement
    >>> class Marker(PlotElement):
    ...     HASH_FIELDS = PlotElement.HASH_FIELDS + ('size',)
    """

    HASH_FIELDS: tuple[str, ...] = (
        'font', 'font_size', 'font_weight', 'text_color', 'tag', 'tooltip'
    )

    def __init__(
            self,
            font: str | Unset = UNSET,
            font_size: float | Unset = UNSET,
            font_weight: float = FontWeights.NORMAL,
            text_color: Color | str | tuple = Color.AUTOMATIC,
            tag: Any = None,
            tooltip: str | None = None
    ):
        self._parent = None
        self.font = font
        self.font_size = font_size
        self.font_weight = font_weight
        self.text_color = text_color
        self.tag = tag
        self.tooltip = tooltip

    @property
    def font(self) -> str | Unset:
        return self._font

    @font.setter
    def font(self, value: str | Unset):
        validate_font(value)
        self._font = value

    @property
    def font_size(self) -> float | Unset:
        return self._font_size

    @font_size.setter
    def font_size(self, value: float | Unset):
        validate_font_size(value)
        self._font_size = value

    @property
    def font_weight(self) -> float:
        return self._font_weight

    @font_weight.setter
    def font_weight(self, value: float):
        validate_font_weight(value)
        self._font_weight = value

    @property
    def text_color(self) -> Color:
        return self._text_color

    @text_color.setter
    def text_color(self, value: Color | str | tuple):
        self._text_color = Color.parse(value)

    @property
    def tooltip(self) -> str | None:
        return self._tooltip

    @tooltip.setter
    def tooltip(self, value: str | None):
        if value is not None and not isinstance(value, str):
            raise TypeError(
                f'"tooltip" must be str or None, got {type(value).__name__}'
            )
        self._tooltip = value

    @property
    def plot_model(self) -> PlotModel | None:
        """The parent plot model, or ``None`` if the element is detached or
        the model no longer exists."""
        return self._parent() if self._parent is not None else None

    def _attach(self, model: PlotModel):
        self._parent = weakref.ref(model)

    def _detach(self):
        self._parent = None

    def _require_model(self, attribute: str) -> PlotModel:
        model = self.plot_model
        if model is None:
            raise NoDefaultAvailableError(
                attribute, 'the element has no parent plot model'
            )
        return model

    def resolved_font(self) -> str:
        """Return the font override, or the model's default font.

        Raises
        ------
        NoDefaultAvailableError
            If the font is unset and no parent model provides a default.
        """
        if is_set(self._font):
            return self._font
        default = self._require_model('font').default_font
        if default is None:
            raise NoDefaultAvailableError(
                'font', 'the plot model has no default font'
            )
        return default

    def resolved_font_size(self) -> float:
        """Return the font size override, or the model's default size.

        Raises
        ------
        NoDefaultAvailableError
            If the size is unset and no parent model provides a default.
        """
        if is_set(self._font_size):
            return self._font_size
        default = self._require_model('font_size').default_font_size
        if default is None:
            raise NoDefaultAvailableError(
                'font_size', 'the plot model has no default font size'
            )
        return default

    def resolved_font_weight(self) -> float:
        return self._font_weight

    def resolved_text_color(self) -> Color:
        """Return the text color, replacing :py:attr:`Color.AUTOMATIC` by
        the model's text color.

        Raises
        ------
        NoDefaultAvailableError
            If the color is automatic and the element has no parent model.
        """
        if not self._text_color.is_automatic:
            return self._text_color
        return self._text_color.actual(
            self._require_model('text_color').text_color
        )

    def resolved_culture(self) -> Culture:
        """Return the culture of the parent model, or the process-wide
        current culture if the element is detached."""
        model = self.plot_model
        if model is None:
            return current_culture()
        return model.actual_culture

    actual_font = property(resolved_font)
    actual_font_size = property(resolved_font_size)
    actual_font_weight = property(resolved_font_weight)
    actual_text_color = property(resolved_text_color)
    actual_culture = property(resolved_culture)

    def element_hash_code(self) -> int:
        """Return a structural hash of the element.

        The hash combines the current values of :py:attr:`HASH_FIELDS` in
        order, so two elements with equal attribute values have equal
        hashes and a changed attribute changes the hash.

        Returns
        -------
        :any:`int`
            Signed 32 bit hash.
        """
        return combine_hashes(
            getattr(self, name) for name in type(self).HASH_FIELDS
        )

    def format(self, template: str, item: Any, *values: Any) -> str:
        """Format ``template`` using the resolved culture.

        Parameters
        ----------
        template : :any:`str`
            Template in :py:meth:`str.format` syntax. Named fields are read
            from ``item``, positional fields from ``values``.
        item : :any:`object`
            Source of named fields, may be ``None``.
        *values
            Values of the positional fields.

        Returns
        -------
        :any:`str`
            The formatted text.

        Examples
        --------
        >>> from splot.core import Culture, PlotModel, TextAnnotation
        >>> model = PlotModel(culture=Culture.get('de-DE'))
        >>> label = TextAnnotation('x')
        >>> model.add_element(label)
        >>> label.format('{0:.1f}', None, 2.5)
        '2,5'
        """
        return format_string(self.resolved_culture(), template, item, *values)

    def text_style(
            self, mode: str = DEFAULT_MODE, **user_style: Any
    ) -> dict[str, Any]:
        """Return the resolved text styling as plotly or matplotlib style.

        See :py:func:`splot.core.style.text_style`.
        """
        return text_style(
            self.resolved_font(), self.resolved_font_size(),
            self.resolved_font_weight(), self.resolved_text_color(),
            mode=mode, user_style=user_style
        )

    def __repr__(self):
        return (
            f'{self.__class__.__name__}('
            f'font={self._font!r}, '
            f'font_size={self._font_size!r}, '
            f'font_weight={self._font_weight!r}, '
            f'text_color={self._text_color!r}, '
            f'tooltip={self._tooltip!r})'
        )
