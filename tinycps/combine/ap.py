"""
Applicative combinators
=======================

ap() and lift() start every source together and pair their emissions
per slot, unlike nested flat_map which would run them one after another.

Multi-emission policy: combine-latest. Each slot keeps the latest function
and the latest argument tuple; any emission fires the slot once the other
side has emitted at least once on it.
"""

from __future__ import annotations

import contextlib
import logging
import threading
import typing
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from .._helpers import call_with, shape, slot, with_arity
from .._types import Args, Callback, CPSFn
from ..adapt.up import of
from ..transform.map import map_

logger = logging.getLogger(__name__)

_MISSING: typing.Any = object()


@dataclass(frozen=True, slots=True)
class ApPolicy:
    """Configuration for ap: whether the latest-value cache needs a lock.
    
    Set threadsafe=True when sources may invoke callbacks from several
    threads at once. Callbacks are always called outside the lock.
    """

    threadsafe: bool = False


class _LatestPairs:
    """Per full call cache of the latest function and argument tuple per slot."""

    __slots__ = ("_functions", "_values", "_lock")

    def __init__(self, policy: ApPolicy) -> None:
        self._functions: dict[int, Callable[..., typing.Any]] = {}
        self._values: dict[int, Args] = {}
        self._lock: contextlib.AbstractContextManager[typing.Any] = (
            threading.RLock() if policy.threadsafe else contextlib.nullcontext()
        )

    def offer_function(self, index: int, fn: Callable[..., typing.Any]) -> Args:
        """Store fn, return the cached value tuple or _MISSING."""
        with self._lock:
            self._functions[index] = fn
            return self._values.get(index, _MISSING)

    def offer_value(self, index: int, args: Args) -> Callable[..., typing.Any]:
        """Store args, return the cached function or _MISSING."""
        with self._lock:
            self._values[index] = args
            return self._functions.get(index, _MISSING)


def _function_sink(cache: _LatestPairs, index: int, callback: Callback | None) -> Callback:
    def emit(fn: Callable[..., typing.Any], *_rest: typing.Any) -> None:
        args = cache.offer_function(index, fn)
        if args is _MISSING:
            logger.debug("ap: slot %d has a function, waiting for a value", index)
            return
        typing.cast(Callback, callback)(fn(*args))

    return emit


def _value_sink(cache: _LatestPairs, index: int, callback: Callback) -> Callback:
    def emit(*args: typing.Any) -> None:
        fn = cache.offer_value(index, args)
        if fn is _MISSING:
            logger.debug("ap: slot %d has a value, waiting for a function", index)
            return
        callback(fn(*args))

    return emit


def ap(*function_sources: CPSFn, policy: ApPolicy = ApPolicy()) -> Callable[[CPSFn], CPSFn]:
    """
    Apply functions emitted by function_sources to values emitted by source.
    
    Function source i delivers functions for slot i through its own slot 0.
    Its other slots are forwarded to the outer callbacks 2, 3, ... so errors
    reported by function sources are not lost. Slots of source without a
    function source pass through unchanged.
    
    Example:
        from tinycps import adapt as A
        
        ap(A.of(lambda x: x * 2))(A.of(5))(print)  # prints 10
    
    Laws (single emission per slot):
    - Identity: ap(of(identity))(v) ≡ v
    - Homomorphism: ap(of(f))(of(x)) ≡ of(f(x))
    - Interchange: ap(u)(of(y)) ≡ ap(of(lambda f: f(y)))(u)
    
    NOTE: The cache lives for one full call. Two full calls of the
          returned function never pair each other's emissions.
          A function source emits the function as the only argument of its
          slot 0; further arguments of that emission are ignored.
    """

    def apply(source: CPSFn) -> CPSFn:
        declared = shape(source)
        function_shapes = [(fs, shape(fs)) for fs in function_sources]

        def run(*callbacks: Callback) -> None:
            cache = _LatestPairs(policy)
            call_with(
                source,
                [
                    _value_sink(cache, index, callback) if index < len(function_sources) else callback
                    for index, callback in enumerate(callbacks)
                ],
                declared,
            )
            for index, (function_source, function_shape) in enumerate(function_shapes):
                call_with(
                    function_source,
                    [_function_sink(cache, index, slot(callbacks, index)), *callbacks[1:]],
                    function_shape,
                )

        return with_arity(run, declared.arity)

    return apply


def _curry_step(fn: Callable[..., typing.Any]) -> Callable[..., Callable[..., typing.Any]]:
    return lambda *args: partial(fn, *args)


def lift(fn: Callable[..., typing.Any]) -> Callable[..., CPSFn]:
    """
    Combine slot 0 of several sources with fn, without sequencing them.
    
    lift(f)(g1, g2) fires slot 0 with f(*args1, *args2) using the latest
    emission of each source, as soon as all of them have emitted.
    Slots >= 1 of every source are forwarded unchanged.
    
    Example:
        from tinycps import adapt as A
        
        lift(lambda a, b: a + b)(A.of(1), A.of(2))(print)  # prints 3
    
    NOTE: lift(f)(g) is exactly ap(of(f))(g). More sources thread
          functools.partial applications through successive ap() calls.
    """

    def apply(*sources: CPSFn) -> CPSFn:
        if not sources:
            raise ValueError("lift() requires at least one source")

        functions: CPSFn = of(fn)
        for source in sources[:-1]:
            functions = ap(map_(_curry_step)(functions))(source)
        return ap(functions)(sources[-1])

    return apply


__all__ = ("ApPolicy", "ap", "lift")
