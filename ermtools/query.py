# Copyright (c) 2025 Varshith Gudur. Licensed under AGPLv3.
from typing import Any, Callable, Iterable, List, Sequence

from .arrayable import collapse_sequence, to_sequence
from .model import Triplet, entity_name


def _has_excluded_edge(edge: Any, names_to_exclude: Sequence[str]) -> bool:
    # A lone string is one name, not a set of substrings
    excluded = {names_to_exclude} if isinstance(names_to_exclude, str) else set(names_to_exclude)
    return any(name in excluded for name in to_sequence(edge))


def _narrow(endpoint: Any, matches: List[Any]) -> Any:
    # Endpoints without matches are kept whole
    return collapse_sequence(matches) if matches else endpoint


def edges_of_name(name: str, triplets: Iterable[Triplet]) -> List[Triplet]:
    """
    Triplets carrying the relationship `name`, with the edge narrowed to just that name.
    """
    result = []
    for source, edge, target in triplets:
        if any(candidate == name for candidate in to_sequence(edge)):
            result.append(Triplet(source, name, target))
    return result


def _edges_matching(
    matches: Callable[[Any], bool],
    require_both: bool,
    names_to_exclude: Sequence[str],
    triplets: Iterable[Triplet],
) -> List[Triplet]:
    result = []
    for source, edge, target in triplets:
        source_matches = [entity for entity in to_sequence(source) if matches(entity)]
        target_matches = [entity for entity in to_sequence(target) if matches(entity)]

        if require_both:
            found = bool(source_matches) and bool(target_matches)
        else:
            found = bool(source_matches) or bool(target_matches)

        if found and not _has_excluded_edge(edge, names_to_exclude):
            result.append(Triplet(_narrow(source, source_matches), edge, _narrow(target, target_matches)))
    return result


def edges_of_node(names_to_exclude: Sequence[str], node: Any, triplets: Iterable[Triplet]) -> List[Triplet]:
    """
    Triplets where `node` itself (identity, not name) is a source or a target.

    Triplets carrying any edge name in `names_to_exclude` are skipped. The
    matching endpoint(s) are narrowed to `node`.
    """
    return _edges_matching(lambda entity: entity is node, False, names_to_exclude, triplets)


def edges_of_nodes(names_to_exclude: Sequence[str], nodes: Iterable[Any], triplets: Iterable[Triplet]) -> List[Triplet]:
    """
    Triplets whose source AND target both contain an entity named like one of `nodes`.

    Unlike `edges_of_node`, entities are matched by name and both endpoints
    must match. Endpoints are narrowed to the matching entities, in order.
    """
    names = {entity_name(node) for node in nodes}
    return _edges_matching(lambda entity: entity_name(entity) in names, True, names_to_exclude, triplets)
