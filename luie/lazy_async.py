from collections.abc import Awaitable, Callable, Generator
from typing import Any, Generic, TypeVar
import asyncio
import functools

from .errors import UninitializedError
from .lazy import _name
from .result import Ok
from .logging import logger


log = logger()

T = TypeVar("T")


def _consume_exception(fut: asyncio.Future[Any]) -> None:
    """Mark the outcome as retrieved, so a handle nobody awaits does not make
    asyncio report the computation's exception."""
    if not fut.cancelled():
        fut.exception()


class LazyAsync(Generic[T]):
    """An asynchronous value that is computed on first request and then kept.

    `get_value()` starts the computation as an `asyncio.Task` and keeps it
    until it fails. Callers that arrive while the task is running all wait on
    the one computation and see the same outcome. Each caller gets a shielded
    handle on the task: cancelling a waiter, or letting it time out, leaves
    the computation and the other waiters alone. Once the computation
    succeeds, the result is also readable synchronously through `value`.

    When the computation raises, every waiter receives the exception, and the
    next `get_value()` starts over. Failures are never cached.

    `get_value()` is a plain method, not a coroutine: the check for a pending
    task and the creation of a new one happen without yielding to the event
    loop, so two concurrent callers can never start two computations.
    """
    __slots__ = ("_fn", "_value", "_pending")

    def __init__(self, fn: Callable[[], Awaitable[T]]):
        self._fn = fn
        self._value: Ok[T] | None = None
        self._pending: asyncio.Task[T] | None = None

    @property
    def value(self) -> T:
        """The last successfully computed value. Never waits; raises
        `UninitializedError` if no computation has succeeded yet."""
        if self._value is None:
            raise UninitializedError()
        return self._value.value

    @property
    def initialized(self) -> bool:
        return self._value is not None

    def get_value(self) -> asyncio.Future[T]:
        """Return a handle on the computation, starting it if none is
        pending. Needs a running event loop."""
        # a task cancelled before its first step never enters `_run`
        if self._pending is None or self._pending.cancelled():
            log.debug(f"computing `{_name(self._fn)}`")
            self._pending = asyncio.get_running_loop().create_task(self._run())
            self._pending.add_done_callback(_consume_exception)
        else:
            log.debug(f"joining computation of `{_name(self._fn)}`")

        handle = asyncio.shield(self._pending)
        if handle is not self._pending:
            handle.add_done_callback(_consume_exception)
        return handle

    def __await__(self) -> Generator[Any, None, T]:
        return self.get_value().__await__()

    async def _run(self) -> T:
        try:
            result = await self._fn()
        except BaseException:
            log.debug(f"clearing pending computation of `{_name(self._fn)}`")
            self._pending = None
            raise
        self._value = Ok(result)
        return result

    def __repr__(self):
        match self._value:
            case Ok(v):
                return f"LazyAsync({v!r})"
            case _ if self._pending is not None and not self._pending.done():
                return "LazyAsync(<running>)"
            case _:
                return "LazyAsync(<pending>)"


def lazify_async(fn: Callable[[], Awaitable[T]]) -> Callable[[], asyncio.Future[T]]:
    """Turn the coroutine function `fn` into a zero-argument function whose
    result is computed once and shared by concurrent callers. Can be used as
    a decorator."""
    lazy = LazyAsync(fn)

    @functools.wraps(fn)
    def get() -> asyncio.Future[T]:
        return lazy.get_value()

    return get
