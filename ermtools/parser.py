# Copyright (c) 2025 Varshith Gudur. Licensed under AGPLv3.
import logging
import os
from typing import Any, List, Optional, Tuple

from .arrayable import collapse_sequence
from .errors import MalformedInputError
from .kinds import DOWNSTREAM_GLYPH, STRICT_ENV_VAR, TRUTHY_ENV_VALUES, UPSTREAM_GLYPH
from .literal import normalize
from .model import AnchorNode, RelationshipEdge, Triplet

logger = logging.getLogger("ermtools.parser")


def strict_from_env() -> bool:
    return os.environ.get(STRICT_ENV_VAR, "").strip().lower() in TRUTHY_ENV_VALUES


class ERMParser:
    def __init__(self, strict: Optional[bool] = None):
        """
        Args:
            strict: If True, relationship names without a direction glyph
                    raise MalformedInputError instead of being dropped.
                    If None (default), read from the ERMTOOLS_STRICT env var.
        """
        self.strict = strict_from_env() if strict is None else strict

    def parse(self, erm: Any) -> List[Triplet]:
        """
        Flatten an ERM into (source, edge, target) triplets.

        - `erm` is one entity-subentity pair or a sequence of them, either as
          a raw literal or built with anchor()/relate().
        - For every relationship edge, in authoring order:
            - upstream names ("<rel") emit (subentities, rel, anchor)
            - downstream names ("rel>") emit (anchor, rel, subentities)
            - nested pairs are then parsed depth-first and appended.
        - A fresh list is built on every call.
        """
        triplets: List[Triplet] = []
        for root in normalize(erm):
            self._walk(root, triplets)

        logger.debug("Parsed %d triplet(s)", len(triplets))
        return triplets

    def _walk(self, node: AnchorNode, triplets: List[Triplet]) -> None:
        entities = collapse_sequence(node.entities)

        for edge in node.edges:
            subentities, subpairs = self._split_items(edge)
            upstream, downstream = self._split_names(edge)

            # Upstream reverses the entity/subentity order
            if upstream:
                triplets.append(Triplet(
                    collapse_sequence(subentities),
                    collapse_sequence(name[len(UPSTREAM_GLYPH):] for name in upstream),
                    entities,
                ))
            if downstream:
                triplets.append(Triplet(
                    entities,
                    collapse_sequence(name[:-len(DOWNSTREAM_GLYPH)] for name in downstream),
                    collapse_sequence(subentities),
                ))

            for subpair in subpairs:
                self._walk(subpair, triplets)

    @staticmethod
    def _split_items(edge: RelationshipEdge) -> Tuple[List[Any], List[AnchorNode]]:
        # A nested pair is both a set of subentities and a subtree to recurse into
        subentities: List[Any] = []
        subpairs: List[AnchorNode] = []
        for item in edge.items:
            if isinstance(item, AnchorNode):
                subentities.extend(item.entities)
                subpairs.append(item)
            else:
                subentities.append(item)
        return subentities, subpairs

    def _split_names(self, edge: RelationshipEdge) -> Tuple[List[str], List[str]]:
        upstream: List[str] = []
        downstream: List[str] = []
        for name in edge.names:
            if name.startswith(UPSTREAM_GLYPH):
                upstream.append(name)
            elif name.endswith(DOWNSTREAM_GLYPH):
                downstream.append(name)
            elif self.strict:
                raise MalformedInputError(
                    f"Relationship name {name!r} has no direction glyph "
                    f"(prefix '{UPSTREAM_GLYPH}' or suffix '{DOWNSTREAM_GLYPH}')"
                )
            else:
                logger.debug("Dropping relationship name without direction glyph: %r", name)
        return upstream, downstream


def parse_entity_relationship_triplets(erm: Any, strict: Optional[bool] = None) -> List[Triplet]:
    return ERMParser(strict=strict).parse(erm)
