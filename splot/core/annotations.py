from numbers import Real

from splot.core.element import PlotElement


class TextAnnotation(PlotElement):
    """A text placed at a fixed position of the plot area.

    Parameters
    ----------
    text : :any:`str`
        The text. May contain named fields (e.g. ``'{tooltip}'``) that are
        filled from the annotation itself by :py:meth:`label`.
    position : tuple[float, float], default=(0.0, 0.0)
        Data coordinates of the text anchor.
    text_rotation : :any:`float`, default=0.0
        Rotation of the text in degrees.
    **kwargs
        Styling overrides, see :py:class:`PlotElement`.

    Raises
    ------
    TypeError
        If ``text`` is not a string or ``position`` is not a pair of
        numbers.
    """

    HASH_FIELDS = PlotElement.HASH_FIELDS + (
        'text', 'position', 'text_rotation'
    )

    def __init__(
            self,
            text: str,
            position: tuple[float, float] = (0.0, 0.0),
            text_rotation: float = 0.0,
            **kwargs
    ):
        super().__init__(**kwargs)
        self.text = text
        self.position = position
        self.text_rotation = text_rotation

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str):
        if not isinstance(value, str):
            raise TypeError(
                f'"text" must be str, got {type(value).__name__}'
            )
        self._text = value

    @property
    def position(self) -> tuple[float, float]:
        return self._position

    @position.setter
    def position(self, value: tuple[float, float]):
        if (
            not isinstance(value, (tuple, list)) or len(value) != 2
            or not all(
                isinstance(v, Real) and not isinstance(v, bool)
                for v in value
            )
        ):
            raise TypeError(
                '"position" must be a tuple of two floats.'
            )
        self._position = tuple(value)

    @property
    def text_rotation(self) -> float:
        return self._text_rotation

    @text_rotation.setter
    def text_rotation(self, value: float):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(
                f'"text_rotation" must be int or float, got '
                f'{type(value).__name__}'
            )
        self._text_rotation = value

    def label(self, *values) -> str:
        """Return :py:attr:`text` formatted against the annotation."""
        return self.format(self.text, self, *values)

    def __repr__(self):
        return (
            f'{self.__class__.__name__}('
            f'text={self.text!r}, '
            f'position={self.position}, '
            f'text_rotation={self.text_rotation}, '
            f'font={self.font!r}, '
            f'font_size={self.font_size!r}, '
            f'text_color={self.text_color!r})'
        )
