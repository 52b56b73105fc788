"""
Scan combinator
===============

Stateful per-slot accumulation over repeated emissions.
"""

from __future__ import annotations

import contextlib
import logging
import threading
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from .._errors import PoisonedSlotError
from .._helpers import call_with, shape, slot, with_arity
from .._types import Callback, CPSFn, Reducer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanPolicy:
    """Configuration for scan: what a raising reducer does to its slot.
    
    on_error:
    - "rollback": accumulator keeps its previous value, the exception
      propagates, later emissions on the slot keep working.
    - "poison": same, and every later emission on the slot raises
      PoisonedSlotError.
    threadsafe: guard accumulator updates with a lock for sources that
    emit from several threads.
    """

    on_error: Literal["rollback", "poison"] = "rollback"
    threadsafe: bool = False

    def __post_init__(self) -> None:
        if self.on_error not in ("rollback", "poison"):
            raise ValueError("ScanPolicy.on_error must be 'rollback' or 'poison'")


@dataclass(slots=True)
class _Accumulators:
    """Accumulator per scanned slot, owned by one scan-produced function."""

    values: list[typing.Any]
    policy: ScanPolicy
    poisoned: set[int] = field(default_factory=set)
    lock: contextlib.AbstractContextManager[typing.Any] = field(default_factory=contextlib.nullcontext)

    def step(self, index: int, reducer: Reducer[typing.Any], args: Sequence[typing.Any]) -> typing.Any:
        with self.lock:
            if index in self.poisoned:
                raise PoisonedSlotError(index)
            try:
                updated = reducer(self.values[index], *args)
            except Exception:
                if self.policy.on_error == "poison":
                    self.poisoned.add(index)
                    logger.warning("scan: reducer failed, slot %d is poisoned", index)
                else:
                    logger.debug("scan: reducer failed on slot %d, accumulator kept", index)
                raise
            self.values[index] = updated
            return updated


def _scanned(state: _Accumulators, index: int, reducer: Reducer[typing.Any] | None, callback: Callback) -> Callback:
    if reducer is None or index >= len(state.values):
        return callback

    def emit(*args: typing.Any) -> None:
        callback(state.step(index, reducer, args))

    return emit


def scan(
    *reducers: Reducer[typing.Any] | None,
    policy: ScanPolicy = ScanPolicy(),
) -> Callable[..., Callable[[CPSFn], CPSFn]]:
    """
    Accumulate emissions per slot: scan(r1, r2, ...)(seed1, seed2, ...)(source).
    
    On emission (a1, a2, ...) on slot i the accumulator becomes
    r_i(acc, a1, a2, ...) and is forwarded as the only argument of callback i.
    Only slots with both a reducer and a seed are scanned, the rest pass through.
    
    Example:
        add = lambda acc, x: acc + x
        source = lambda cb: (cb(2), cb(8))
        
        scan(add)(10)(source)(print)  # prints 12, then 20
    
    NOTE: Accumulators are created once, when the seeded scan is applied to
          source. Every full call of the returned function keeps
          accumulating on the same state.
    """

    def seeded(*seeds: typing.Any) -> Callable[[CPSFn], CPSFn]:
        def apply(source: CPSFn) -> CPSFn:
            declared = shape(source)
            state = _Accumulators(
                values=list(seeds),
                policy=policy,
                lock=threading.RLock() if policy.threadsafe else contextlib.nullcontext(),
            )

            def run(*callbacks: Callback) -> None:
                call_with(
                    source,
                    [_scanned(state, index, slot(reducers, index), callback) for index, callback in enumerate(callbacks)],
                    declared,
                )

            return with_arity(run, declared.arity)

        return apply

    return seeded


__all__ = ("ScanPolicy", "scan")
