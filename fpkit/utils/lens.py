"""Lenses focused on the elements of a 2-tuple.

A lens is a getter/setter pair for one part of an immutable whole. ``set``
never modifies the whole it is given; it returns a new one.
"""

from typing import Callable, Optional, Protocol, Tuple, TypeVar

S = TypeVar('S')
T = TypeVar('T')
A = TypeVar('A')
B = TypeVar('B')


class Lens(Protocol[S, T]):
    """Structural interface shared by all lenses."""

    @staticmethod
    def get(whole: S) -> Optional[T]:
        ...

    @staticmethod
    def set(part: T, whole: S) -> S:
        ...


class LensFirst:
    """Lens on the first element of a 2-tuple.

    Examples:
        >>> LensFirst.get((1, 2))
        1
        >>> LensFirst.set(3, (1, 2))
        (3, 2)
    """

    @staticmethod
    def get(whole: Tuple[A, B]) -> Optional[A]:
        a, _ = whole
        return a

    @staticmethod
    def set(part: A, whole: Tuple[A, B]) -> Tuple[A, B]:
        _, b = whole
        return part, b


class LensSecond:
    """Lens on the second element of a 2-tuple.

    Examples:
        >>> LensSecond.get((1, 2))
        2
        >>> LensSecond.set(3, (1, 2))
        (1, 3)
    """

    @staticmethod
    def get(whole: Tuple[A, B]) -> Optional[B]:
        _, b = whole
        return b

    @staticmethod
    def set(part: B, whole: Tuple[A, B]) -> Tuple[A, B]:
        a, _ = whole
        return a, part


def over(lens: type[Lens[S, T]], f: Callable[[T], T], whole: S) -> S:
    """Replace the focused part of ``whole`` with ``f`` applied to it.

    Examples:
        >>> over(LensSecond, lambda x: x * 10, (1, 2))
        (1, 20)
    """
    return lens.set(f(lens.get(whole)), whole)
