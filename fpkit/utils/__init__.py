"""
fpkit utility modules - pure functions organized by domain.

Modules:
    function_utils: Combinators that bind, drop or reorder arguments
    tuple_utils: Construction, projection and mapping of 2-tuples
    lens: Getter/setter pairs for the elements of a 2-tuple
    iter_utils: Pipeline helpers over iterables
    logging: Library logger and colour constants
"""

__all__ = [
    "function_utils",
    "tuple_utils",
    "lens",
    "iter_utils",
    "logging",
]
