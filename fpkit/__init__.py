"""
fpkit - small higher-order helpers for point-free Python.

Package structure:
    fpkit/
        utils/      - Pure combinators, tuple helpers, lenses, pipeline helpers
        config.py   - Environment-driven settings

The most used names are re-exported here, e.g.::

    from fpkit import apply_second, fmap
    list(map(apply_second(double, fmap), [[1], [2], [3]]))
"""

from fpkit.utils.function_utils import (
    always,
    flip,
    first_arg,
    second_arg,
    apply_first,
    apply_second,
)
from fpkit.utils.tuple_utils import (
    duplicate,
    cons,
    spread,
    first,
    second,
    map_first,
    map_second,
)
from fpkit.utils.lens import Lens, LensFirst, LensSecond, over
from fpkit.utils.iter_utils import fmap, flat_map, pipe

__version__ = "0.1.0"
__all__ = [
    "always", "flip", "first_arg", "second_arg", "apply_first", "apply_second",
    "duplicate", "cons", "spread", "first", "second", "map_first", "map_second",
    "Lens", "LensFirst", "LensSecond", "over",
    "fmap", "flat_map", "pipe",
]
