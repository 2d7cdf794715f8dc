"""
A container for a value that may or may not be present.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .errors import AbsentValueError, NoValuePresentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

_CREATE_KEY = object()


class Optional(Generic[T]):
    """
    A container object which may or may not contain a non-``None`` value.

    An ``Optional`` is either *present*, holding exactly one value, or *empty*.
    ``None`` is the absent marker: it is never held as a present value. Instances
    are created with the factories :meth:`.of`, :meth:`.empty` and
    :meth:`.of_nullable` and cannot be changed after construction.

    Examples
    --------
    Wrapping a value that might be ``None``::

        >>> from optionals import Optional
        >>> Optional.of_nullable(5).map(lambda x: x * 2).get()
        10
        >>> Optional.of_nullable(None).or_else(0)
        0
        >>> Optional[int].empty()
        Optional.empty()
    """

    __slots__ = ("_value",)

    def __init__(self, create_key: object, value: T | None) -> None:
        if create_key is not _CREATE_KEY:
            raise TypeError(
                "Optional objects must be created with Optional.of, "
                "Optional.empty or Optional.of_nullable"
            )

        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple:
        return (_restore, (self._value,))

    @classmethod
    def of(cls, value: T) -> Optional[T]:
        """
        Returns an ``Optional`` holding the specified value.

        The caller asserts that ``value`` is not ``None``. The argument is not
        rejected if it is: the result then behaves like :meth:`.empty`, and a
        warning is logged. Use :meth:`.of_nullable` for values that may be
        ``None``.
        """
        if value is None:
            logger.warning(
                "Optional.of() received None, the result is empty. "
                "Use Optional.of_nullable() for values that may be None."
            )

        return cls(_CREATE_KEY, value)

    @classmethod
    def empty(cls) -> Optional[T]:
        """Returns an empty ``Optional``."""
        return cls(_CREATE_KEY, None)

    @classmethod
    def of_nullable(cls, value: T | None) -> Optional[T]:
        """
        Returns an ``Optional`` holding ``value`` if it is not ``None``,
        otherwise an empty ``Optional``.
        """
        if value is None:
            return cls.empty()

        return cls(_CREATE_KEY, value)

    def get(self) -> T:
        """
        Returns the held value.

        Raises
        ------
        NoValuePresentError
            If the ``Optional`` is empty.
        """
        if self._value is None:
            raise NoValuePresentError()

        return self._value

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return not self.is_present()

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        """Calls ``consumer`` with the value if a value is present."""
        if self._value is not None:
            consumer(self._value)

    def if_present_or_else(
        self, consumer: Callable[[T], Any], empty_action: Callable[[], Any]
    ) -> None:
        """
        Calls ``consumer`` with the value if a value is present, otherwise calls
        ``empty_action`` without arguments. Exactly one of the two is called.
        """
        if self._value is not None:
            consumer(self._value)
        else:
            empty_action()

    def if_empty(self, action: Callable[[], Any]) -> None:
        """Calls ``action`` without arguments if no value is present."""
        if self.is_empty():
            action()

    def or_else(self, other: T) -> T:
        """
        Returns the value if present, otherwise ``other``.

        ``other`` is a plain value and is evaluated by the caller in any case.
        """
        if self._value is None:
            return other

        return self._value

    def or_else_throw(self, msg: str) -> T:
        """
        Returns the value if present, otherwise raises an error with the
        provided message.

        Parameters
        ----------
        msg
            The message of the :class:`.AbsentValueError` raised if no value is
            present.

        Raises
        ------
        AbsentValueError
            If the ``Optional`` is empty.
        """
        if self._value is None:
            logger.debug(f"Raising AbsentValueError from {self!r}: {msg}")
            raise AbsentValueError(msg)

        return self._value

    def map(self, fn: Callable[[T], U]) -> Optional[U]:
        """
        Applies ``fn`` to the value if present and returns an ``Optional``
        holding the result.

        The result is wrapped with :meth:`.of`, so a mapping function returning
        ``None`` leads to an empty ``Optional``. If no value is present, ``fn`` is
        not called and an empty ``Optional`` is returned.
        """
        if self._value is None:
            return Optional.empty()

        return Optional.of(fn(self._value))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Optional):
            return self._value == other._value
        else:
            raise NotImplementedError(
                f"Optional cannot be compared to {type(other).__name__}"
            )

    def __hash__(self) -> int:
        return hash((Optional, self._value))

    def __repr__(self) -> str:
        if self._value is None:
            return "Optional.empty()"

        return f"Optional.of({self._value!r})"

    def __str__(self) -> str:
        if self._value is None:
            return "Optional.empty"

        return f"Optional({self._value})"


def _restore(value: T | None) -> Optional[T]:
    """Rebuilds an ``Optional`` for :mod:`copy` and :mod:`pickle`."""
    return Optional(_CREATE_KEY, value)
