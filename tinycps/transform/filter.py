"""Filter combinator

Drop emissions that fail a per-slot predicate."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import call_with, shape, slot, with_arity
from .._types import Callback, CPSFn, Predicate


def _filtered(callback: Callback, predicate: Predicate | None) -> Callback:
    if predicate is None:
        return callback

    def emit(*args: typing.Any) -> None:
        if predicate(*args):
            callback(*args)

    return emit


def filter_(*predicates: Predicate | None) -> Callable[[CPSFn], CPSFn]:
    """
    Forward emission on slot i only if predicate i is truthy for its arguments.
    
    Arguments are forwarded unchanged; slots without a predicate pass through.
    """

    def apply(source: CPSFn) -> CPSFn:
        declared = shape(source)

        def run(*callbacks: Callback) -> None:
            call_with(
                source,
                [_filtered(callback, slot(predicates, index)) for index, callback in enumerate(callbacks)],
                declared,
            )

        return with_arity(run, declared.arity)

    return apply


__all__ = ("filter_",)
