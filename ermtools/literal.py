# Copyright (c) 2025 Varshith Gudur. Licensed under AGPLv3.
"""
Raw ERM literals.

An ERM literal is built from nested lists/tuples, pairing entities with
glyphed relationship names:

    [
        BigBank,
        ["<Software system of",
            [Customer, ["Withdraws cash using>", ATM]],
            [[Staff, ATM], ["Uses>", Mainframe]],
            Mainframe,
        ],
    ]

Nothing in the literal says whether a list is "some entities" or "an
entity-subentity pair", so it is inferred from its shape here and turned
into the tagged AnchorNode / RelationshipEdge tree the parser walks.
Callers who build with `anchor()` / `relate()` skip the guessing.
"""
import logging
from typing import Any, List

from .errors import MalformedInputError
from .model import AnchorNode, RelationshipEdge, anchor, is_entity, relate

logger = logging.getLogger("ermtools.literal")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, RelationshipEdge)) and not is_entity(value)


def is_entity_models(candidate: Any) -> bool:
    """
    Is the candidate one or many entities (True) or an entity-subentity pair (False)?

    A pair always holds a relationship slot, which is list-shaped, in its
    second position; a list of entities doesn't. A one-element list is
    always entities.
    """
    # One entity
    if is_entity(candidate):
        return True

    if isinstance(candidate, AnchorNode):
        return False

    if isinstance(candidate, (list, tuple)):
        if not candidate:
            raise MalformedInputError("Expected entities or an entity-subentity pair, got an empty sequence")
        # Many entities
        if len(candidate) == 1 or not _is_sequence(candidate[1]):
            return True
        return False

    raise MalformedInputError(f"Cannot tell whether {candidate!r} is an entity or an entity-subentity pair")


def normalize(erm: Any) -> List[AnchorNode]:
    """Turn one entity-subentity pair, or a sequence of them, into tagged root nodes."""
    if isinstance(erm, AnchorNode):
        return [erm]

    if not isinstance(erm, (list, tuple)) or is_entity(erm) or not erm:
        raise MalformedInputError(f"ERM must be a non-empty sequence, got {erm!r}")

    first = erm[0]
    if not isinstance(first, AnchorNode) and is_entity_models(first):
        pairs = [erm]
    else:
        pairs = list(erm)

    roots = [_to_anchor_node(pair) for pair in pairs]
    logger.debug("Normalized ERM literal into %d root pair(s)", len(roots))
    return roots


def _to_anchor_node(pair: Any) -> AnchorNode:
    if isinstance(pair, AnchorNode):
        return pair

    if not isinstance(pair, (list, tuple)) or is_entity(pair) or not pair:
        raise MalformedInputError(f"Entity-subentity pair must be a non-empty sequence, got {pair!r}")

    entities, *slots = pair
    return anchor(entities, *(_to_relationship_edge(slot) for slot in slots))


def _to_relationship_edge(slot: Any) -> RelationshipEdge:
    if isinstance(slot, RelationshipEdge):
        return slot

    if not isinstance(slot, (list, tuple)) or is_entity(slot) or len(slot) < 2:
        raise MalformedInputError(
            f"Relationship-subentity pair must hold name(s) followed by at least one item, got {slot!r}"
        )

    names, *items = slot
    return relate(names, *(_to_item(item) for item in items))


def _to_item(item: Any) -> Any:
    if isinstance(item, AnchorNode):
        return item
    # Entities are handed over as-is; relate() flattens entity lists
    if is_entity_models(item):
        return item
    return _to_anchor_node(item)
