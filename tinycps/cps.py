"""
CPS wrapper
===========

Fluent facade over a raw CPS function. Calling the wrapper is calling the
function; every combinator method returns a new wrapper.

Example:
    from tinycps import CPS
    
    total = (
        CPS(sensor)
        .filter(lambda reading: reading is not None)
        .map(lambda reading: reading.celsius)
        .scan(lambda acc, t: acc + t)(0.0)
    )
    total(print, log_error)
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._helpers import shape
from ._types import Binder, CPSFn, Predicate, Reducer, Transform
from .adapt.up import never, of, of_n
from .combine.ap import ApPolicy, ap, lift
from .combine.merge import merge
from .stream.scan import ScanPolicy, scan
from .transform.filter import filter_
from .transform.flat_map import flat_map
from .transform.map import map_


class CPS:
    """CPS function with combinators attached as methods.
    
    Transparent: CPS(f)(*args) is f(*args), including its return value.
    """

    __slots__ = ("_fn", "__wrapped__")

    def __init__(self, fn: CPSFn, /) -> None:
        self._fn = fn.unwrap() if isinstance(fn, CPS) else fn
        # inspect.signature() follows __wrapped__, so shape(CPS(f)) == shape(f)
        self.__wrapped__ = self._fn

    # Constructors

    @staticmethod
    def of(*values: typing.Any) -> CPS:
        """Lift values into a CPS emitting them once on slot 0."""
        return CPS(of(*values))

    @staticmethod
    def of_n(n: int) -> Callable[..., CPS]:
        """Like CPS.of, but on slot n."""
        lift_values = of_n(n)
        return lambda *values: CPS(lift_values(*values))

    @staticmethod
    def never() -> CPS:
        """CPS that never emits."""
        return CPS(never)

    @staticmethod
    def lift(fn: Callable[..., typing.Any]) -> Callable[..., CPS]:
        """Applicative lift returning a wrapper."""
        lifted_fn = lift(fn)
        return lambda *sources: CPS(lifted_fn(*sources))

    # Functor / monad

    def map(self, *transforms: Transform | None) -> CPS:
        return CPS(map_(*transforms)(self._fn))

    def filter(self, *predicates: Predicate | None) -> CPS:
        return CPS(filter_(*predicates)(self._fn))

    def flat_map(self, *binders: Binder | None) -> CPS:
        return CPS(flat_map(*binders)(self._fn))

    chain = flat_map

    # Applicative / monoid

    def ap(self, *function_sources: CPSFn, policy: ApPolicy = ApPolicy()) -> CPS:
        return CPS(ap(*function_sources, policy=policy)(self._fn))

    def merge(self, *others: CPSFn) -> CPS:
        return CPS(merge(self._fn, *others))

    # Accumulation

    def scan(
        self,
        *reducers: Reducer[typing.Any] | None,
        policy: ScanPolicy = ScanPolicy(),
    ) -> Callable[..., CPS]:
        """scan(r1, ...)(seed1, ...) bound to this function."""
        seeded = scan(*reducers, policy=policy)
        return lambda *seeds: CPS(seeded(*seeds)(self._fn))

    # Protocol methods

    @property
    def arity(self) -> int | None:
        """Declared number of callback slots, None when variadic."""
        return shape(self._fn).arity

    def unwrap(self) -> CPSFn:
        """The raw CPS function."""
        return self._fn

    def __call__(self, *args: typing.Any) -> object:
        return self._fn(*args)

    def __repr__(self) -> str:
        return f"CPS({self._fn!r})"


def wrap(fn: CPSFn) -> CPS:
    """Function form of CPS(fn)."""
    return CPS(fn)


__all__ = ("CPS", "wrap")
