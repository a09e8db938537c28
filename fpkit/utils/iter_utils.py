"""Pipeline helpers over iterables.

These adapt common iteration steps into one-argument functions so they chain
with the combinators in :mod:`fpkit.utils.function_utils`.
"""

import collections.abc
from typing import Callable, Iterable, Iterator, List, TypeVar

from toolz import compose_left, concat

from fpkit.utils.logging import log

T = TypeVar('T')
U = TypeVar('U')


def fmap(iterable: Iterable[T], func: Callable[[T], U]) -> List[U]:
    """Map ``func`` over ``iterable`` and collect the results in a list.

    The sequence comes first so that binding the function with
    ``apply_second`` yields a one-argument step.

    Examples:
        >>> from fpkit.utils.function_utils import apply_second
        >>> double = lambda x: x * 2
        >>> list(map(apply_second(double, fmap), [[1], [2], [3]]))
        [[2], [4], [6]]
    """
    return [func(item) for item in iterable]


def _is_nested(item) -> bool:
    return isinstance(item, collections.abc.Iterable) and not isinstance(item, (str, bytes))


def flat_map(func: Callable[[T], Iterable[U] | U], iterable: Iterable[T]) -> Iterator[U]:
    """Apply function to each element in iterable and flatten results.

    Results that are not iterable (or are strings/bytes) are kept as single
    items, so ``flat_map`` also works as a plain map.

    Args:
        func: Function to apply to each element
        iterable: Iterable to process

    Returns:
        Iterator over the flattened results

    Examples:
        >>> list(flat_map(lambda x: [x, x * 2], [1, 2, 3]))
        [1, 2, 2, 4, 3, 6]
        >>> list(flat_map(lambda s: s.upper(), ['ab', 'c']))
        ['AB', 'C']
    """
    return concat(result if _is_nested(result) else (result,) for result in map(func, iterable))


def pipe(*funcs: Callable, is_do_process: Callable[[], bool] = lambda: True) -> Callable:
    """Compose functions left to right, with an optional on/off switch.

    Args:
        *funcs: Functions to apply in order
        is_do_process: Predicate checked on each call; when it returns False the
            input is returned unchanged

    Returns:
        Function that threads a value through ``funcs``

    Examples:
        >>> add_one = lambda x: x + 1
        >>> double = lambda x: x * 2
        >>> pipe(add_one, double)(5)
        12
    """
    for func in funcs:
        if not callable(func):
            raise TypeError(f"pipe() expects callables, got {type(func).__name__}")
    composed = compose_left(*funcs) if funcs else (lambda value: value)

    def pipeline(value):
        if not is_do_process():
            log.debug(f"pipe: processing disabled, passing {type(value).__name__} through")
            return value
        return composed(value)

    return pipeline
