# Copyright (c) 2025 Varshith Gudur. Licensed under AGPLv3.
from typing import Dict, Hashable, Iterable, Mapping


def reverse_one_to_many_dictionary(one_to_many: Mapping[Hashable, Iterable[Hashable]]) -> Dict[Hashable, Hashable]:
    """
    Reverse a one-to-many mapping so every member of every value points back at its key.

    Lets a lookup table with many keys sharing one value be written the other
    way round, grouped by value:

        >>> reverse_one_to_many_dictionary({
        ...     "LABEL_CREATED": ["PU", "PX", "OC"],
        ...     "OUT_FOR_DELIVERY": ["OD"],
        ... })
        {'PU': 'LABEL_CREATED', 'PX': 'LABEL_CREATED', 'OC': 'LABEL_CREATED', 'OD': 'OUT_FOR_DELIVERY'}

    A member listed under several keys ends up pointing at the last one.
    """
    return {value: key for key, values in one_to_many.items() for value in values}
