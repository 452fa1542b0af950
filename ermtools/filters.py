# Copyright (c) 2025 Varshith Gudur. Licensed under AGPLv3.
from typing import Any

# Predicates for use with filter(), e.g. list(filter(is_not_nullish, values))

def is_not_nullish(value: Any) -> bool:
    return value is not None

def is_truthy(value: Any) -> bool:
    """Same as bool(value): False for None, False, zeros, empty strings and empty containers."""
    return bool(value)
