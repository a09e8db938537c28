"""Pure functions for building, reading and transforming 2-tuples."""

from typing import Callable, Tuple, TypeVar

from fpkit.utils.function_utils import _ensure_callable, _label

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')


def duplicate(a: A) -> Tuple[A, A]:
    """Pair a value with itself.

    Examples:
        >>> duplicate(1)
        (1, 1)
    """
    return a, a


def cons(a: A, b: B) -> Tuple[A, B]:
    """Build a 2-tuple from two arguments.

    Examples:
        >>> cons(1, 2)
        (1, 2)
    """
    return a, b


def spread(f: Callable[[A, B], C]) -> Callable[[Tuple[A, B]], C]:
    """Turn a 2-arity function into one that takes a single 2-tuple.

    Args:
        f: Function taking ``(a, b)``

    Returns:
        Function taking ``(a, b)`` packed as a tuple

    Examples:
        >>> from operator import add
        >>> spread(add)((1, 2))
        3
        >>> list(map(spread(add), [(1, 2), (3, 4)]))
        [3, 7]
    """
    _ensure_callable(f, 'spread')

    def spread_call(pair: Tuple[A, B]) -> C:
        a, b = pair
        return f(a, b)

    return _label(spread_call, 'spread', f)


def first(pair: Tuple[A, B]) -> A:
    """Return the first element of a 2-tuple."""
    a, _ = pair
    return a


def second(pair: Tuple[A, B]) -> B:
    """Return the second element of a 2-tuple."""
    _, b = pair
    return b


def map_first(f: Callable[[A], C]) -> Callable[[Tuple[A, B]], Tuple[C, B]]:
    """Lift ``f`` to transform only the first element of a 2-tuple.

    Examples:
        >>> double = lambda x: x * 2
        >>> map_first(double)((1, 2))
        (2, 2)
    """
    _ensure_callable(f, 'map_first')

    def mapped(pair: Tuple[A, B]) -> Tuple[C, B]:
        a, b = pair
        return f(a), b

    return _label(mapped, 'map_first', f)


def map_second(f: Callable[[B], C]) -> Callable[[Tuple[A, B]], Tuple[A, C]]:
    """Lift ``f`` to transform only the second element of a 2-tuple.

    Examples:
        >>> double = lambda x: x * 2
        >>> map_second(double)((1, 2))
        (1, 4)
    """
    _ensure_callable(f, 'map_second')

    def mapped(pair: Tuple[A, B]) -> Tuple[A, C]:
        a, b = pair
        return a, f(b)

    return _label(mapped, 'map_second', f)
