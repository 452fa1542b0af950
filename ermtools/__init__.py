# Copyright (c) 2025 Varshith Gudur. Licensed under AGPLv3.
from .errors import ErmError, MalformedInputError
from .arrayable import Many, to_sequence, collapse_sequence
from .model import Entity, Triplet, AnchorNode, RelationshipEdge, anchor, relate
from .parser import ERMParser, parse_entity_relationship_triplets
from .query import edges_of_name, edges_of_node, edges_of_nodes
from .dictionary import reverse_one_to_many_dictionary
from .filters import is_not_nullish, is_truthy

__all__ = [
    "ErmError",
    "MalformedInputError",
    "Many",
    "to_sequence",
    "collapse_sequence",
    "Entity",
    "Triplet",
    "AnchorNode",
    "RelationshipEdge",
    "anchor",
    "relate",
    "ERMParser",
    "parse_entity_relationship_triplets",
    "edges_of_name",
    "edges_of_node",
    "edges_of_nodes",
    "reverse_one_to_many_dictionary",
    "is_not_nullish",
    "is_truthy",
]
