"""
Опускание CPS в значение.

Run a CPS function with recording callbacks and inspect what it emitted.
Only synchronous emissions are observed: anything a source emits after the
full call returns is not recorded.
"""

from __future__ import annotations

import logging
import typing
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .._errors import NoEmissionError
from .._helpers import call_with
from .._types import Args, Callback, CPSFn

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Emission:
    """One invocation of one callback slot."""

    slot: int
    args: Args


def _recorder(sink: list[Emission], index: int) -> Callback:
    def record(*args: typing.Any) -> None:
        sink.append(Emission(index, args))

    return record


def collect(cps: CPSFn, slots: int = 2) -> list[Emission]:
    """
    Full-call cps with `slots` recording callbacks, return emissions in order.
    
    Example:
        from tinycps import adapt as A
        
        A.down.collect(A.of(1, 2))
        # [Emission(slot=0, args=(1, 2))]
    """
    emissions: list[Emission] = []
    call_with(cps, [_recorder(emissions, index) for index in range(slots)])
    return emissions


def _collapse(args: Args) -> typing.Any:
    if len(args) == 1:
        return args[0]
    return args


def to_result(cps: CPSFn) -> Result[typing.Any, typing.Any]:
    """
    Run cps and return its first emission as a Result.
    
    Slot 0 becomes Ok, slot 1 becomes Error. A single argument is unwrapped,
    zero or several arguments stay a tuple.
    
    Example:
        A.down.to_result(A.up.catching(lambda: 1 / 0))
        # Error(ZeroDivisionError(...))
    
    NOTE: Raises NoEmissionError when nothing is emitted synchronously.
          Later emissions are still delivered to the recorders but ignored.
    """
    emissions: list[Emission] = []
    call_with(cps, [_recorder(emissions, 0), _recorder(emissions, 1)])
    if not emissions:
        logger.debug("to_result: %r emitted nothing synchronously", cps)
        raise NoEmissionError()

    first = emissions[0]
    if first.slot == 0:
        return Ok(_collapse(first.args))
    return Error(_collapse(first.args))


__all__ = (
    "Emission",
    "collect",
    "to_result",
)
