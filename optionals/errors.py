"""
Errors raised when a value is required from an empty :class:`.Optional`.
"""


class AbsentValueError(RuntimeError):
    """
    A value was required, but the :class:`.Optional` is empty.

    Raised by :meth:`.Optional.or_else_throw` with the message supplied by the
    caller. Subclasses :class:`RuntimeError`, so handlers written for the
    ``expect``/``unwrap`` style of option types keep working.
    """


class NoValuePresentError(AbsentValueError):
    """Raised by :meth:`.Optional.get` on an empty :class:`.Optional`."""

    def __init__(self, msg: str = "No value present") -> None:
        super().__init__(msg)
