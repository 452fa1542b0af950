# Copyright (c) 2025 Varshith Gudur. Licensed under AGPLv3.
from typing import Any, Iterable, List

from .errors import MalformedInputError
from .kinds import NAME_FIELD


class Many(tuple):
    """
    A non-empty, ordered collection of values.

    Used as the "many" side of a one-or-many value: a triplet endpoint is
    either a single entity or a Many of entities, never a one-element Many.
    Compares equal to a plain tuple with the same members.
    """

    def __new__(cls, values: Iterable[Any] = ()):
        values = tuple(values)
        if not values:
            raise MalformedInputError("Many requires at least one value")
        return super().__new__(cls, values)

    def __repr__(self) -> str:
        return f"Many({tuple.__repr__(self)})"


def _is_named_tuple(value: Any) -> bool:
    # A NamedTuple entity is one value, not a sequence of its fields
    return isinstance(value, tuple) and isinstance(getattr(value, NAME_FIELD, None), str)


def to_sequence(value: Any) -> List[Any]:
    """
    Normalize a one-or-many value into a list.

    Lists and tuples (Many included) are flattened one level; anything else,
    strings, mappings and named tuples carrying a `name` field included,
    becomes a one-element list.

    WARNING: don't use this on a single value that happens to be
    sequence-shaped, it will be treated as many values.
    Name the result in the plural: `for entity in to_sequence(entities)`.
    """
    if isinstance(value, (list, tuple)) and not _is_named_tuple(value):
        return list(value)
    return [value]


def collapse_sequence(sequence: Iterable[Any]) -> Any:
    """
    Inverse of `to_sequence`: the sole element of a one-element sequence,
    otherwise the sequence as a Many.
    """
    values = tuple(sequence)
    if not values:
        raise MalformedInputError("Cannot collapse an empty sequence")
    if len(values) == 1:
        return values[0]
    return Many(values)
