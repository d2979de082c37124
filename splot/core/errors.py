class NoDefaultAvailableError(LookupError):
    """Raised when an element attribute is unset and no parent model
    provides a default for it.

    Parameters
    ----------
    attribute : :any:`str`
        Name of the element attribute that could not be resolved.
    reason : :any:`str`, default=''
        Why the lookup failed, e.g. the element has no parent.
    """

    def __init__(self, attribute: str, reason: str = ''):
        self.attribute = attribute
        self.reason = reason
        message = f'No default available for "{attribute}"'
        if reason:
            message += f': {reason}'
        super().__init__(message)
