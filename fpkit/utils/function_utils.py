"""Pure function combinators.

Helpers that rearrange the arity or argument order of other functions so they
slot into point-free pipelines. Every combinator only builds a closure: the
wrapped function is never called at construction time, and anything it raises
later propagates to the caller untouched.
"""

from typing import Callable, TypeVar

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')


def _ensure_callable(func, combinator: str) -> None:
    if not callable(func):
        raise TypeError(f"{combinator}() expects a callable, got {type(func).__name__}")


def _func_name(func) -> str:
    return getattr(func, '__name__', type(func).__name__)


def _label(closure: Callable, combinator: str, func) -> Callable:
    """Give a returned closure a name that points back at what it wraps."""
    closure.__name__ = closure.__qualname__ = f"{combinator}({_func_name(func)})"
    return closure


# ============================================================================
# CONSTANT AND ARGUMENT SELECTION
# ============================================================================


def always(a: A) -> Callable[[], A]:
    """Create a function that always returns the same value.

    Examples:
        >>> one = always(1)
        >>> one()
        1
    """
    def constant() -> A:
        return a

    constant.__name__ = constant.__qualname__ = f"always({type(a).__name__})"
    return constant


def flip(f: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """Swap the arguments of a 2-arity function.

    Args:
        f: Function taking ``(a, b)``

    Returns:
        Function taking ``(b, a)`` that calls ``f(a, b)``

    Examples:
        >>> from operator import sub
        >>> flip(sub)(3, 5)
        2
    """
    _ensure_callable(f, 'flip')

    def flipped(b: B, a: A) -> C:
        return f(a, b)

    return _label(flipped, 'flip', f)


def first_arg(f: Callable[[A], C]) -> Callable[[A, B], C]:
    """Adapt a 1-arity function to take two arguments, keeping only the first.

    Examples:
        >>> double = lambda x: x * 2
        >>> first_arg(double)(3, 4)
        6
    """
    _ensure_callable(f, 'first_arg')

    def on_first(a: A, _b: B) -> C:
        return f(a)

    return _label(on_first, 'first_arg', f)


def second_arg(f: Callable[[B], C]) -> Callable[[A, B], C]:
    """Adapt a 1-arity function to take two arguments, keeping only the second.

    Examples:
        >>> double = lambda x: x * 2
        >>> second_arg(double)(3, 4)
        8
    """
    _ensure_callable(f, 'second_arg')

    def on_second(_a: A, b: B) -> C:
        return f(b)

    return _label(on_second, 'second_arg', f)


# ============================================================================
# PARTIAL APPLICATION
# ============================================================================


def apply_first(a: A, f: Callable[[A, B], C]) -> Callable[[B], C]:
    """Supply the first argument to a 2-arity function.

    This is the same binding ``functools.partial(f, a)`` performs, offered with
    the same argument order as :func:`apply_second` so the two read alike in a
    pipeline.

    Args:
        a: Value bound as the first argument
        f: Function taking ``(a, b)``

    Returns:
        Function of ``b`` that evaluates ``f(a, b)``

    Examples:
        >>> from operator import add
        >>> add1 = apply_first(1, add)
        >>> add1(2)
        3
    """
    _ensure_callable(f, 'apply_first')

    def applied(b: B) -> C:
        return f(a, b)

    return _label(applied, 'apply_first', f)


def apply_second(b: B, f: Callable[[A, B], C]) -> Callable[[A], C]:
    """Supply the second argument to a 2-arity function.

    Python closures bind leading arguments easily; binding the trailing one is
    the gap this fills. The typical use is turning a sequence-first operation
    into a one-argument step of a pipeline.

    Args:
        b: Value bound as the second argument
        f: Function taking ``(a, b)``

    Returns:
        Function of ``a`` that evaluates ``f(a, b)``. It can be called any
        number of times; ``f`` and ``b`` are held by reference, never copied
        or modified.

    Raises:
        TypeError: If ``f`` is not callable. Errors raised by ``f`` itself
            surface only when the returned function is called, unchanged.

    Examples:
        >>> from operator import sub
        >>> sub1 = apply_second(1, sub)
        >>> sub1(2)
        1
    """
    _ensure_callable(f, 'apply_second')

    def applied(a: A) -> C:
        return f(a, b)

    return _label(applied, 'apply_second', f)
