"""Internal helpers for combinators.

Common functions used across multiple combinator modules.
These are not part of the public API but can be used for writing custom combinators."""

from __future__ import annotations

import inspect
from collections.abc import Sequence
from dataclasses import dataclass

from ._types import Callback, CPSFn

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def slot[T](items: Sequence[T | None], index: int) -> T | None:
    """
    Per-slot lookup that treats a missing position as "not supplied".
    
    Combinators accept fewer transforms than callbacks, so slot i
    without a transform is just None.
    """
    if index < len(items):
        return items[index]
    return None

@dataclass(frozen=True, slots=True)
class Shape:
    """Declared callback arity of a CPS function.
    
    required: positional parameters without defaults
    maximum: all positional parameters, None when *args is accepted
    """

    required: int
    maximum: int | None

    @property
    def arity(self) -> int | None:
        """Declared slot count, None for variadic functions with no fixed slots."""
        if self.maximum is None and self.required == 0:
            return None
        return self.required if self.maximum is None else self.maximum

    def without_leading(self, count: int) -> Shape:
        """Shape left after `count` leading parameters are supplied by a partial call."""
        maximum = None if self.maximum is None else max(self.maximum - count, 0)
        return Shape(required=max(self.required - count, 0), maximum=maximum)

VARIADIC = Shape(required=0, maximum=None)

def shape(fn: CPSFn) -> Shape:
    """
    Inspect how many callbacks fn declares.
    
    Callables without an inspectable signature (some builtins, C extensions)
    are treated as variadic.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return VARIADIC

    required = 0
    maximum: int | None = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            maximum = None
        elif parameter.kind in _POSITIONAL:
            if maximum is not None:
                maximum += 1
            if parameter.default is inspect.Parameter.empty:
                required += 1
    return Shape(required=required, maximum=maximum)

def fit(callbacks: Sequence[Callback | None], declared: Shape) -> list[Callback | None]:
    """
    Reconcile a callback list with a declared shape.
    
    Surplus callbacks are dropped, missing required ones become None so the
    failure surfaces only when that slot is actually invoked.
    """
    fitted = list(callbacks)
    if declared.maximum is not None:
        fitted = fitted[: declared.maximum]
    if len(fitted) < declared.required:
        fitted.extend([None] * (declared.required - len(fitted)))
    return fitted

def signature_for(declared: Shape) -> inspect.Signature:
    """Positional-only signature whose shape() is `declared`."""
    parameters = [
        inspect.Parameter(f"callback{index}", inspect.Parameter.POSITIONAL_ONLY)
        for index in range(declared.required)
    ]
    if declared.maximum is None:
        parameters.append(inspect.Parameter("callbacks", inspect.Parameter.VAR_POSITIONAL))
    else:
        parameters.extend(
            inspect.Parameter(f"callback{index}", inspect.Parameter.POSITIONAL_ONLY, default=None)
            for index in range(declared.required, declared.maximum)
        )
    return inspect.Signature(parameters)

def declare[F: CPSFn](fn: F, declared: Shape) -> F:
    """Attach a signature so shape(fn) reports `declared`."""
    fn.__signature__ = signature_for(declared)  # type: ignore[attr-defined]
    return fn

def with_arity[F: CPSFn](fn: F, arity: int | None) -> F:
    """
    Declare the slot count of a combinator-produced function.
    
    The function keeps accepting any number of callbacks; missing ones up to
    `arity` are padded with None by call_with(). Unknown arity leaves fn variadic.
    """
    if arity is None:
        return fn
    return declare(fn, Shape(required=arity, maximum=None))

def call_with(
    fn: CPSFn,
    callbacks: Sequence[Callback | None],
    declared: Shape | None = None,
) -> object:
    """
    Full-call fn with callbacks fitted to its declared arity.
    
    Pass a precomputed `declared` shape when calling the same fn repeatedly.
    """
    if declared is None:
        declared = shape(fn)
    return fn(*fit(callbacks, declared))

__all__ = (
    "identity",
    "slot",
    "Shape",
    "VARIADIC",
    "shape",
    "fit",
    "signature_for",
    "declare",
    "with_arity",
    "call_with",
)
