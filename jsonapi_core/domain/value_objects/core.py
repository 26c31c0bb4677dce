"""Domain value objects for relationship data and meta sources.

A source is either a plain value or a zero-argument producer that is
evaluated on first read. Both resolve through the same `resolve()` call so
callers never branch on which kind they hold.
"""

import functools
import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class LiteralValue(Generic[T]):
    """Value supplied directly; resolves to itself."""

    value: T

    def resolve(self) -> T:
        return self.value


@dataclass
class LazyValue(Generic[T]):
    """Value supplied as a zero-argument producer.

    The producer runs once, on the first `resolve()`. The result is cached
    so later reads return the same object even if the producer would not.
    """

    producer: Callable[[], T]
    _resolved: bool = field(default=False, init=False, repr=False)
    _value: Any = field(default=None, init=False, repr=False)

    def resolve(self) -> T:
        """Return the produced value, invoking the producer on first call."""
        if not self._resolved:
            self._value = self.producer()
            self._resolved = True
        return self._value

    @property
    def is_resolved(self) -> bool:
        return self._resolved


Value = LiteralValue[T] | LazyValue[T]


def _is_producer(source: Any) -> bool:
    # Classes are callable but are treated as values.
    if isinstance(source, type):
        return False
    if isinstance(source, functools.partial):
        return True
    return inspect.isfunction(source) or inspect.ismethod(source) or inspect.isbuiltin(source)


def value_of(source: Any) -> LiteralValue[Any] | LazyValue[Any]:
    """Wrap a raw value or producer in the matching value object.

    Functions, lambdas, bound methods and functools.partial objects become
    LazyValue; anything else becomes LiteralValue. Existing value objects are
    returned unchanged.

    Args:
        source: Plain value or zero-argument producer.

    Returns:
        LiteralValue or LazyValue wrapping source.
    """
    if isinstance(source, (LiteralValue, LazyValue)):
        return source
    if _is_producer(source):
        return LazyValue(source)
    return LiteralValue(source)
