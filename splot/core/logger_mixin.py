import logging

from typing import Any


class LoggerMixin:
    """
    A mixin giving every plot model (or other container) its own logger.

    The logger is named after the concrete class
    (``<module>.<ClassName>``), does not propagate to the root logger and
    only carries a :py:class:`logging.NullHandler` unless debug output is
    requested.

    Parameters
    ----------
    *args : Any
        Positional arguments passed to the parent class (if any).
    debug : bool, optional
        Attach a stream handler and log at DEBUG level. Default is False.
    **kwargs : Any
        Additional keyword arguments passed to the parent class (if any).

    Attributes
    ----------
    logger : logging.Logger
        The logger configured for the subclass.
    """

    _formatter = logging.Formatter(
        fmt=(
            "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d "
            "- %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    def __init__(self, *args: Any, debug: bool = False, **kwargs: Any):
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        self._logger.propagate = False

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        self._logger.setLevel(logging.WARNING)

        if debug:
            # one stream handler per logger, no matter how many instances
            if not any(isinstance(h, logging.StreamHandler)
                       for h in self._logger.handlers):
                sh = logging.StreamHandler()
                sh.setFormatter(self._formatter)
                self._logger.addHandler(sh)
            self._logger.setLevel(logging.DEBUG)

        self._logger.debug(
            "Instantiated %s(debug=%s)", self.__class__.__name__, debug
        )

    @property
    def logger(self) -> logging.Logger:
        """
        Returns the logger instance associated with this object.

        Returns
        -------
        logging.Logger
            The configured logger.
        """
        if not hasattr(self, "_logger"):
            LoggerMixin.__init__(self)
        return self._logger

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        orig_init = cls.__dict__.get("__init__")
        if orig_init is None:
            return

        def wrapped_init(self, *a, **k):
            # set up the logger BEFORE the subclass body runs
            LoggerMixin.__init__(self, debug=k.get("debug", False))
            return orig_init(self, *a, **k)

        cls.__init__ = wrapped_init
