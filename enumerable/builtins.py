from __future__ import annotations
from typing import Any

from enumerable.function_registry import FunctionRegistry
from enumerable.truth import truthy

# -------------------------------
# Basic value blocks
# -------------------------------
def identity(item: Any) -> Any:
    return item

def logical_not(item: Any) -> bool:
    return not truthy(item)

# -------------------------------
# Registration
# -------------------------------
def register(registry: FunctionRegistry):
    # Sequence helpers that take no block can be passed as blocks themselves,
    # e.g. map([[1, 2], [3, 4]], "first").
    from enumerable.combinators.sequences import first, initial, index_of, zip, unzip

    for name, fn in {
        'identity': identity,
        'truthy': truthy,
        'not': logical_not,
        'first': first,
        'initial': initial,
        'index_of': index_of,
        'zip': zip,
        'unzip': unzip,
    }.items():
        registry.define(name, fn)
