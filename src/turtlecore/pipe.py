"""Left-to-right function composition."""

from collections.abc import Callable
from functools import reduce
from typing import Any


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose `fns` so that ``pipe(f, g)(x) == g(f(x))``.

    An exception in any stage propagates; no partial result is returned.
    """

    def run(initial: Any) -> Any:
        return reduce(lambda value, fn: fn(value), fns, initial)

    return run
