"""
Decorators that alter when, or how often, a function actually runs.

`once` and `memoize` are purely synchronous. `delay` and `throttle` rely on a timer to do something in the future; by
default this is a daemon `threading.Timer`, but any factory with the same shape as `TimerFactory` can be plugged in,
e.g. to integrate with some other event loop or to make tests deterministic.
"""

import logging
import threading

from typing import Any, Callable, Hashable, Optional, Protocol, TypeVar

from functools import wraps

from atmfjstc.lib.py_lang_utils.token import Token


LOG = logging.getLogger(__name__)


T = TypeVar('T')

KeyFunc = Callable[..., Hashable]


class TimerLike(Protocol):
    def start(self) -> None:
        ...


TimerFactory = Callable[[float, Callable[[], None]], TimerLike]


_NOT_CALLED = Token(str_='NOT_CALLED', repr_='NOT_CALLED')


def once(func: Callable[..., T]) -> Callable[..., T]:
    """
    Returns a version of a function that can be called at most one time.

    Subsequent calls return the result of the first call, even if that was None, without running the function again.
    If the first call raises, nothing is remembered and the next call will try again.

    The wrapper is thread-safe: calls from other threads wait for the first call to finish. A call made by the function
    itself (directly or indirectly) while its first call is still running raises `RuntimeError`, as there is no result
    to return yet.
    """
    lock = threading.RLock()
    result = _NOT_CALLED
    running = False

    @wraps(func)
    def _wrapper(*args, **kwargs):
        nonlocal result, running

        with lock:
            if result is not _NOT_CALLED:
                return result

            if running:
                raise RuntimeError(f"{getattr(func, '__name__', func)} re-entered during its single allowed call")

            running = True
            try:
                result = func(*args, **kwargs)
            finally:
                running = False

            return result

    return _wrapper


def memoize(func: Optional[Callable[..., T]] = None, *, key: Optional[KeyFunc] = None):
    """
    Returns a version of a function that remembers the result computed for each combination of arguments.

    Can be used either as a plain decorator (``@memoize``) or with parameters (``@memoize(key=...)``).

    Args:
        func: The function to memoize
        key: By default, the cache key is made up of all the positional and keyword arguments, which must therefore be
            hashable. If they are not, or if only some aspect of them matters, supply a function here that will be
            called with the same arguments and must return a hashable cache key.

    Returns:
        The memoizing wrapper. It has a `cache_clear()` method that forgets all remembered results. Note that None is
        remembered like any other result.
    """
    if func is None:
        return lambda f: memoize(f, key=key)

    cache = dict()

    def _make_key(args, kwargs):
        if key is not None:
            return key(*args, **kwargs)

        return args, tuple(sorted(kwargs.items()))

    @wraps(func)
    def _wrapper(*args, **kwargs):
        cache_key = _make_key(args, kwargs)

        try:
            if cache_key in cache:
                return cache[cache_key]
        except TypeError as e:
            func_name = getattr(func, '__name__', func)

            if key is not None:
                raise TypeError(
                    f"Cannot memoize call to {func_name}: the key function returned an unhashable value {cache_key!r}"
                ) from e

            raise TypeError(
                f"Cannot memoize call to {func_name} with unhashable arguments {cache_key!r}. Use the key= parameter "
                f"to provide a hashable cache key."
            ) from e

        result = func(*args, **kwargs)
        cache[cache_key] = result

        return result

    _wrapper.cache_clear = cache.clear

    return _wrapper


def delay(func: Callable, wait: float, *args, timer_factory_: Optional[TimerFactory] = None, **kwargs) -> TimerLike:
    """
    Calls a function with the given arguments, after a delay.

    Args:
        func: The function to call
        wait: The delay, in seconds
        *args: Positional arguments to pass to the function
        timer_factory_: A function ``(wait, callback) -> timer`` that creates a not-yet-started timer. If None, a daemon
            `threading.Timer` is used.
        **kwargs: Keyword arguments to pass to the function

    Returns:
        The timer, already started. For the default `threading.Timer`, you can ``join()`` it to wait until the call is
        done. Whatever the function returns is discarded.
    """
    _check_wait(wait)

    timer = (timer_factory_ or _make_daemon_timer)(wait, lambda: func(*args, **kwargs))
    timer.start()

    LOG.debug("Scheduled call to %s in %ss", getattr(func, '__name__', func), wait)

    return timer


def throttle(func: Callable[..., T], wait: float, *, timer_factory: Optional[TimerFactory] = None) -> Callable[..., T]:
    """
    Returns a version of a function that will actually run at most once during any window of `wait` seconds.

    The first call runs immediately and opens the window. Calls made while the window is open are dropped, not queued;
    they just return the result of the last call that did run. A timer closes the window after `wait` seconds.

    A call dropped while a real invocation is still running (in another thread) waits for it and returns its result. A
    call made by the function itself during its own invocation is dropped and returns the previous result, or None if
    there has been none yet.

    Args:
        func: The function to throttle
        wait: The window length, in seconds
        timer_factory: Same as for `delay`. The default is a daemon `threading.Timer`.
    """
    _check_wait(wait)

    make_timer = timer_factory or _make_daemon_timer
    lock = threading.RLock()
    waiting = False
    last_result = None

    def _close_window():
        nonlocal waiting

        with lock:
            waiting = False

    @wraps(func)
    def _wrapper(*args, **kwargs):
        nonlocal waiting, last_result

        with lock:
            if waiting:
                LOG.debug("Throttled call to %s dropped", getattr(func, '__name__', func))
                return last_result

            waiting = True

            make_timer(wait, _close_window).start()

            last_result = func(*args, **kwargs)

            return last_result

    return _wrapper


def _make_daemon_timer(wait: float, callback: Callable[[], Any]) -> threading.Timer:
    timer = threading.Timer(wait, callback)
    timer.daemon = True

    return timer


def _check_wait(wait: float):
    if wait < 0:
        raise ValueError(f"Wait time must be non-negative, got {wait!r}")
