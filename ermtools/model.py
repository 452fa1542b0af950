# Copyright (c) 2025 Varshith Gudur. Licensed under AGPLv3.
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, NamedTuple, Tuple, Union

from .arrayable import Many, to_sequence
from .errors import MalformedInputError
from .kinds import NAME_FIELD


@dataclass(eq=False)
class Entity:
    """
    A named node of an entity-relationship model.

    Entities compare by identity: two Entity objects with the same name are
    still two nodes. Any mapping with a "name" key, or any object with a
    string `name` attribute, is accepted wherever an entity is expected.
    """
    name: str
    attributes: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"Entity({self.name!r})"


def entity_name(entity: Any) -> Any:
    if isinstance(entity, Mapping):
        return entity.get(NAME_FIELD)
    return getattr(entity, NAME_FIELD, None)


def is_entity(candidate: Any) -> bool:
    # Strings and lists are never entities; a tuple is one only if it carries a name field
    if isinstance(candidate, (str, bytes, list)):
        return False
    name = entity_name(candidate)
    return isinstance(name, str) and bool(name)


class Triplet(NamedTuple):
    """
    Normalized (source, edge, target) unit.

    Endpoints are an entity or a Many of entities; edge is a relationship
    name or a Many of names, glyphs stripped.
    """
    source: Any
    edge: Union[str, Many]
    target: Any

    def __str__(self) -> str:
        def label(value):
            return ", ".join(str(entity_name(v) if is_entity(v) else v) for v in to_sequence(value))
        return f"({label(self.source)}) --[{label(self.edge)}]--> ({label(self.target)})"


@dataclass(frozen=True)
class RelationshipEdge:
    """
    Relationship name(s) plus the sub-entities / nested pairs they lead to.

    Entity lists among the items are flattened, so `items` only ever holds
    entities and AnchorNodes.
    """
    names: Tuple[str, ...]
    items: Tuple[Any, ...]

    def __post_init__(self):
        items = tuple(to_sequence(self.items))
        if not items:
            raise MalformedInputError(f"Relationship {self.names!r} must lead to at least one item")

        flat = []
        for item in items:
            if isinstance(item, AnchorNode):
                flat.append(item)
            else:
                flat.extend(_entities(item, "Relationship item"))

        object.__setattr__(self, "names", _names(self.names))
        object.__setattr__(self, "items", tuple(flat))


@dataclass(frozen=True)
class AnchorNode:
    """Anchor entities plus the relationship edges hanging off them."""
    entities: Tuple[Any, ...]
    edges: Tuple[RelationshipEdge, ...] = ()

    def __post_init__(self):
        edges = tuple(self.edges)
        for edge in edges:
            if not isinstance(edge, RelationshipEdge):
                raise MalformedInputError(f"AnchorNode edges must be RelationshipEdge values, got {edge!r}")

        object.__setattr__(self, "entities", _entities(self.entities, "Anchor"))
        object.__setattr__(self, "edges", edges)


def _entities(value: Any, what: str) -> Tuple[Any, ...]:
    entities = tuple(to_sequence(value))
    if not entities:
        raise MalformedInputError(f"{what} must contain at least one entity")
    for entity in entities:
        if not is_entity(entity):
            raise MalformedInputError(f"{what} member is not an entity: {entity!r}")
    return entities


def _names(value: Any) -> Tuple[str, ...]:
    names = tuple(to_sequence(value))
    if not names:
        raise MalformedInputError("Relationship slot must contain at least one name")
    for name in names:
        if not isinstance(name, str):
            raise MalformedInputError(f"Relationship name must be a string, got {name!r}")
    return names


def anchor(entities: Any, *edges: RelationshipEdge) -> AnchorNode:
    """
    Tagged Entity-Subentity Pair.

    Equivalent to the literal `[entities, *edges]` without shape sniffing:
        anchor(A, relate("uses>", B), relate("<owns", C))
    """
    return AnchorNode(entities=entities, edges=edges)


def relate(names: Any, *items: Any) -> RelationshipEdge:
    """
    Tagged Relationship-Subentity Pair.

    `names` is one glyphed name or a sequence of them; each item is an
    entity, a list of entities, or a nested `anchor(...)`.
    """
    return RelationshipEdge(names=names, items=items)
