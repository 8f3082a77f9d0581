"""Registry of combinators.

Maps public names to the functions that implement them. Several names
shadow Python builtins (map, filter, all, any, min, max, zip), so the
intended usage is a module alias:

    from enumerable import combinators as _
    _.map([1, 2, 3], lambda x: x * 2)
"""

from enumerable.combinators.iteration import each, each_with_index, each_slice, times
from enumerable.combinators.transform import map, sort_by, group_by
from enumerable.combinators.folding import reduce, reduce_right
from enumerable.combinators.predicates import (
    find,
    detect,
    filter,
    select,
    reject,
    partition,
    all,
    any,
    every,
    some,
    take_while,
)
from enumerable.combinators.extrema import min, max
from enumerable.combinators.sequences import zip, unzip, index_of, first, initial

COMBINATORS = {
    "each": each,
    "each_with_index": each_with_index,
    "each_slice": each_slice,
    "times": times,
    "map": map,
    "sort_by": sort_by,
    "group_by": group_by,
    "reduce": reduce,
    "reduce_right": reduce_right,
    "find": find,
    "detect": detect,
    "filter": filter,
    "select": select,
    "reject": reject,
    "partition": partition,
    "all": all,
    "any": any,
    "every": every,
    "some": some,
    "take_while": take_while,
    "min": min,
    "max": max,
    "zip": zip,
    "unzip": unzip,
    "index_of": index_of,
    "first": first,
    "initial": initial,
}

__all__ = list(COMBINATORS) + ["COMBINATORS"]
