"""
Вызов параметризованных CPS функций.

A parametrized CPS function takes its input parameters first and its
callbacks last: `fetch(url, on_ok, on_error)`. These helpers perform the
partial call so the result plugs into any combinator.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import wraps

from .._helpers import declare, shape
from .._types import Callback, CPSFn

if typing.TYPE_CHECKING:
    from ..cps import CPS


def call(fn: Callable[..., object], *params: typing.Any) -> CPSFn:
    """
    Supply input parameters now, callbacks later.
    
    **When to use:** This is the preferred pattern for locality! Keep the
    parametrized function plain and lift it at the call site.
    
    Example:
        def read_sensor(sensor_id, on_reading, on_error): ...
        
        readings = call(read_sensor, "t-1")
        readings(print, log_error)  # read_sensor("t-1", print, log_error)
    
    NOTE: The result declares the callback slots fn has left after params,
          so combinators fit their callback lists to it.
    """

    def run(*callbacks: Callback) -> object:
        return fn(*params, *callbacks)

    return declare(run, shape(fn).without_leading(len(params)))


def lifted(fn: Callable[..., object]) -> Callable[..., CPS]:
    """
    Decorator form of call(): calling the decorated function with its input
    parameters returns a CPS wrapper awaiting callbacks.
    
    Example:
        @lifted
        def countdown(start, on_tick):
            for n in range(start, 0, -1):
                on_tick(n)
        
        countdown(3).map(lambda n: n * 10)(print)  # 30, 20, 10
    """
    from ..cps import CPS

    @wraps(fn)
    def wrapper(*params: typing.Any) -> CPS:
        return CPS(call(fn, *params))

    return wrapper


__all__ = (
    "call",
    "lifted",
)
