"""Left-to-right function application for combinator pipelines."""

from __future__ import annotations

import typing
from collections.abc import Callable


def pipe(*fns: Callable[..., typing.Any]) -> Callable[..., typing.Any]:
    """
    Compose left to right: the first function gets the arguments, every
    next one gets the previous result.
    
    Example:
        readings = pipe(map_(celsius), filter_(lambda t: t > 0))(sensor)
    """

    def run(*args: typing.Any) -> typing.Any:
        if not fns:
            return args[0] if len(args) == 1 else args
        result = fns[0](*args)
        for fn in fns[1:]:
            result = fn(result)
        return result

    return run


def pipeline(*args: typing.Any) -> Callable[..., typing.Any]:
    """
    Data first version of pipe().
    
    Example:
        totals = pipeline(sensor)(map_(celsius), scan(add)(0))
    """

    def run(*fns: Callable[..., typing.Any]) -> typing.Any:
        return pipe(*fns)(*args)

    return run


__all__ = ("pipe", "pipeline")
