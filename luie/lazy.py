from collections.abc import Callable
from typing import Generic, TypeVar
import functools

from .result import Ok
from .logging import logger


log = logger()

T = TypeVar("T")


class Lazy(Generic[T]):
    """A value that is computed on first access and then kept.

    The computation `fn` is not called until `value` is read. A successful
    result is cached; any later read returns it without calling `fn` again.
    If `fn` raises, the exception propagates to the reader unmodified and
    nothing is cached, so the next read calls `fn` again.

    Presence is tracked with `Ok`, so `None` is cached like any other
    result.
    """
    __slots__ = ("_fn", "_value")

    def __init__(self, fn: Callable[[], T]):
        self._fn = fn
        self._value: Ok[T] | None = None

    @property
    def value(self) -> T:
        if self._value is None:
            log.debug(f"computing `{_name(self._fn)}`")
            self._value = Ok(self._fn())
        return self._value.value

    @property
    def initialized(self) -> bool:
        return self._value is not None

    def __repr__(self):
        match self._value:
            case Ok(v):
                return f"Lazy({v!r})"
            case _:
                return "Lazy(<pending>)"


def lazify(fn: Callable[[], T]) -> Callable[[], T]:
    """Turn `fn` into a zero-argument function that computes its result once.
    Can be used as a decorator."""
    lazy = Lazy(fn)

    @functools.wraps(fn)
    def get() -> T:
        return lazy.value

    return get


def _name(fn: Callable) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
