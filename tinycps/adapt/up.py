"""
Подъем значений в CPS.

Functions for turning plain values, kungfu Results and exception-based code
into CPS functions.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import SlotIndexError
from .._types import Callback, CPSFn


def of(*values: typing.Any) -> CPSFn:
    """
    Lift values into a CPS function of arity 1.
    
    Every full call invokes the first callback exactly once with `values`.
    
    Example:
        from tinycps import adapt as A
        
        A.of(1, 2)(print)  # prints "1 2"
    
    **Grammar:** `A.up.of(x, y)` reads as "lift up of x and y"
    """

    def run(callback: Callback, /, *_rest: Callback) -> None:
        callback(*values)

    return run


def of_n(n: int) -> Callable[..., CPSFn]:
    """
    Like of(), but emits on slot n instead of slot 0.
    
    Example:
        failed = of_n(1)(ValueError("bad input"))
        failed(on_ok, on_error)  # on_error(ValueError(...))
    
    NOTE: of == of_n(0). A negative n raises SlotIndexError right away,
          not at emission time.
    """
    if n < 0:
        raise SlotIndexError(n)

    def lift_values(*values: typing.Any) -> CPSFn:
        def run(*callbacks: Callback) -> None:
            callbacks[n](*values)

        return run

    return lift_values


def never(*_callbacks: Callback) -> None:
    """CPS function that never calls any of its callbacks. Identity for merge()."""


def from_result[T, E](result: Result[T, E]) -> CPSFn:
    """
    Lift an already-computed Result into a two-slot CPS function.
    
    Ok(value) emits on slot 0, Error(err) emits on slot 1.
    
    Example:
        from tinycps import adapt as A
        
        A.up.from_result(Ok(42))(on_ok, on_error)  # on_ok(42)
    """

    def run(on_ok: Callback, on_error: Callback | None = None, /, *_rest: Callback) -> None:
        match result:
            case Ok(value):
                on_ok(value)
            case Error(err):
                typing.cast(Callback, on_error)(err)
            case _ as unreachable:
                assert_never(unreachable)

    return run


def catching[T](thunk: Callable[[], T]) -> CPSFn:
    """
    Evaluate thunk on every full call; value goes to slot 0, exception to slot 1.
    
    **When to use:** Bridge between exception-based code and callback slots.
    The combinators themselves never turn exceptions into emissions,
    this adapter is the explicit opt-in.
    
    Example:
        import json
        
        parsed = A.up.catching(lambda: json.loads(raw))
        parsed(on_data, on_parse_error)
    
    NOTE: Catches Exception subclasses raised by thunk only. An exception
          raised by the slot-0 callback itself propagates.
    """

    def run(on_ok: Callback, on_error: Callback | None = None, /, *_rest: Callback) -> None:
        try:
            value = thunk()
        except Exception as exc:
            typing.cast(Callback, on_error)(exc)
            return
        on_ok(value)

    return run


__all__ = (
    "of",
    "of_n",
    "never",
    "from_result",
    "catching",
)
