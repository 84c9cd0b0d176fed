"""
Function decorators: take any function and return a new one with different
call semantics.

Each call to ``once``, ``memoize`` or ``throttle`` creates a fresh state
object that only the returned wrapper touches. ``delay`` and the trailing
call of ``throttle`` are scheduled on the asyncio event loop with
``call_later``, so they run on the loop thread between other callbacks,
never alongside caller code.
"""

import time
import asyncio
import logging
import functools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


def _name(func: Callable) -> str:
    return getattr(func, "__qualname__", repr(func))


def _check_wait(wait_ms: float) -> None:
    if wait_ms < 0:
        raise ValueError(f"wait_ms must be >= 0, got {wait_ms}")


def _run_deferred(func: Callable, args: Tuple, kwargs: Dict) -> Any:
    try:
        return func(*args, **kwargs)
    except Exception as e:
        logger.error(f"Deferred call to {_name(func)} failed: {e}")
        raise


# ---------- once ----------

@dataclass
class OnceState:
    """Closure state for ``once``"""
    called: bool = False
    result: Any = None


def once(func: Callable) -> Callable:
    """Return a function that runs ``func`` on its first call only.

    Every later call, whatever its arguments, returns the first result.
    """
    state = OnceState()

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not state.called:
            logger.debug(f"once: first call to {_name(func)}")
            state.result = func(*args, **kwargs)
            state.called = True
        return state.result

    wrapper.state = state
    return wrapper


# ---------- memoize ----------

def memoize(func: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Cache ``func`` results per argument.

    Only for one-argument functions whose argument is hashable; anything
    else raises TypeError when the cache lookup is attempted.
    """
    cache: Dict[Any, Any] = {}

    @functools.wraps(func)
    def wrapper(arg):
        if arg not in cache:
            logger.debug(f"memoize: cache miss for {_name(func)}({arg!r})")
            cache[arg] = func(arg)
        return cache[arg]

    wrapper.cache = cache
    return wrapper


# ---------- delay ----------

def delay(func: Callable, wait_ms: float, *args, loop: Optional[asyncio.AbstractEventLoop] = None,
          **kwargs) -> asyncio.TimerHandle:
    """Call ``func(*args, **kwargs)`` after ``wait_ms`` milliseconds.

    Returns immediately with the loop's TimerHandle; ``handle.cancel()``
    stops the call if it has not happened yet. Without ``loop`` this must be
    called from a running event loop.

    ``loop`` is consumed by ``delay`` itself, so a keyword argument named
    ``loop`` cannot be forwarded to ``func``; bind it with
    ``functools.partial`` first if ``func`` needs one.
    """
    _check_wait(wait_ms)
    loop = loop or asyncio.get_running_loop()
    logger.debug(f"delay: {_name(func)} scheduled in {wait_ms}ms")
    return loop.call_later(wait_ms / 1000, _run_deferred, func, args, kwargs)


# ---------- throttle ----------

@dataclass
class ThrottleState:
    """Closure state for ``throttle``"""
    last_called: Optional[float] = None
    pending: Optional[asyncio.TimerHandle] = None
    result: Any = None
    args: Tuple = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)


def throttle(func: Callable, wait_ms: float, loop: Optional[asyncio.AbstractEventLoop] = None,
             clock: Callable[[], float] = time.monotonic) -> Callable:
    """Return a function that runs ``func`` at most once per ``wait_ms`` window.

    A call outside the window runs ``func`` immediately. A call inside it
    schedules one trailing run for when the window ends; further calls
    before that only replace the arguments the trailing run will use. The
    wrapper always returns the latest computed result, which may be stale
    until the trailing run happens.
    """
    _check_wait(wait_ms)
    state = ThrottleState()

    def _invoke(args, kwargs):
        state.result = func(*args, **kwargs)
        state.last_called = clock()
        return state.result

    def _trailing():
        state.pending = None
        logger.debug(f"throttle: trailing call to {_name(func)}")
        try:
            _invoke(state.args, state.kwargs)
        except Exception as e:
            logger.error(f"Deferred call to {_name(func)} failed: {e}")
            raise

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if state.pending is not None:
            state.args, state.kwargs = args, kwargs
            return state.result

        now = clock()
        elapsed_ms = None if state.last_called is None else (now - state.last_called) * 1000
        if elapsed_ms is None or elapsed_ms >= wait_ms:
            return _invoke(args, kwargs)

        remaining_ms = wait_ms - elapsed_ms
        state.args, state.kwargs = args, kwargs
        state.pending = (loop or asyncio.get_running_loop()).call_later(remaining_ms / 1000, _trailing)
        logger.debug(f"throttle: {_name(func)} deferred by {remaining_ms:.1f}ms")
        return state.result

    def cancel():
        """Drop a pending trailing call, if any."""
        if state.pending is not None:
            state.pending.cancel()
            state.pending = None

    wrapper.state = state
    wrapper.cancel = cancel
    return wrapper
