# Copyright (c) 2025 Varshith Gudur. Licensed under AGPLv3.
import pytest

from ermtools import (
    Entity,
    Many,
    Triplet,
    edges_of_name,
    edges_of_node,
    edges_of_nodes,
    parse_entity_relationship_triplets,
)

A = Entity("A")
B = Entity("B")
C = Entity("C")
D = Entity("D")

# --- edges_of_name ---

@pytest.fixture
def named_triplets():
    return parse_entity_relationship_triplets([
        A,
        ["alpha>", B],
        ["beta>", C],
        ["alpha>", D],
    ])

def test_edges_of_name_single_match(named_triplets):
    assert edges_of_name("beta", named_triplets) == [(A, "beta", C)]

def test_edges_of_name_multiple_matches(named_triplets):
    assert edges_of_name("alpha", named_triplets) == [
        (A, "alpha", B),
        (A, "alpha", D),
    ]

def test_edges_of_name_no_match(named_triplets):
    assert edges_of_name("gamma", named_triplets) == []

def test_edges_of_name_narrows_multi_valued_edge():
    triplets = parse_entity_relationship_triplets([A, [["x>", "y>"], B]])
    result = edges_of_name("y", triplets)
    assert result == [(A, "y", B)]
    assert isinstance(result[0], Triplet)

# --- edges_of_node ---

@pytest.fixture
def node_triplets():
    return parse_entity_relationship_triplets([
        A,
        ["rel1>", B],
        ["rel2>", C],
    ])

def test_edges_of_node_as_source(node_triplets):
    assert edges_of_node([], A, node_triplets) == [
        (A, "rel1", B),
        (A, "rel2", C),
    ]

def test_edges_of_node_as_target(node_triplets):
    assert edges_of_node([], B, node_triplets) == [(A, "rel1", B)]

def test_edges_of_node_excludes_names(node_triplets):
    assert edges_of_node(["rel1"], A, node_triplets) == [(A, "rel2", C)]

def test_edges_of_node_not_found(node_triplets):
    assert edges_of_node([], D, node_triplets) == []

def test_edges_of_node_matches_by_identity(node_triplets):
    # Same name, different entity
    assert edges_of_node([], Entity("A"), node_triplets) == []

def test_edges_of_node_narrows_matching_endpoint_only():
    triplets = [Triplet(Many((A, B)), "r", Many((C, D)))]
    assert edges_of_node([], B, triplets) == [(B, "r", (C, D))]

def test_edges_of_node_excludes_on_any_edge_name():
    triplets = [Triplet(A, Many(("keep", "drop")), B)]
    assert edges_of_node(["drop"], A, triplets) == []

# --- edges_of_nodes ---

@pytest.fixture
def nodes_triplets():
    return parse_entity_relationship_triplets([
        A,
        ["rel1>", B],
        ["rel2>", C],
        ["rel3>", D],
    ])

def test_edges_of_nodes_both_endpoints_in_list(nodes_triplets):
    assert edges_of_nodes([], [A, B, C], nodes_triplets) == [
        (A, "rel1", B),
        (A, "rel2", C),
    ]

def test_edges_of_nodes_only_source_in_list(nodes_triplets):
    assert edges_of_nodes([], [A], nodes_triplets) == []

def test_edges_of_nodes_only_target_in_list(nodes_triplets):
    assert edges_of_nodes([], [B, C, D], nodes_triplets) == []

def test_edges_of_nodes_excludes_names(nodes_triplets):
    assert edges_of_nodes(["rel1"], [A, B, C], nodes_triplets) == [(A, "rel2", C)]

def test_edges_of_nodes_no_connecting_edges(nodes_triplets):
    assert edges_of_nodes([], [B, C], nodes_triplets) == []

def test_edges_of_nodes_matches_by_name(nodes_triplets):
    result = edges_of_nodes([], [{"name": "A"}, Entity("B")], nodes_triplets)
    assert result == [(A, "rel1", B)]
    # Narrowed endpoints keep the triplet's own entities
    assert result[0].source is A
    assert result[0].target is B

def test_node_and_nodes_semantics_differ(nodes_triplets):
    # OR vs AND over the endpoints
    assert len(edges_of_node([], A, nodes_triplets)) == 3
    assert edges_of_nodes([], [A], nodes_triplets) == []

# --- NARROWING ---

def test_narrowing_keeps_original_order():
    triplets = [Triplet(Many((A, B, C)), "r", D)]
    assert edges_of_nodes([], [C, D, A], triplets) == [((A, C), "r", D)]

def test_narrowing_to_one_collapses():
    triplets = [Triplet(Many((A, B, C)), "r", D)]
    result = edges_of_nodes([], [B, D], triplets)
    assert result == [(B, "r", D)]
    assert result[0].source is B

def test_queries_do_not_mutate_input():
    triplets = [Triplet(Many((A, B)), Many(("r", "s")), Many((C, D)))]
    snapshot = list(triplets)

    edges_of_name("r", triplets)
    edges_of_node([], A, triplets)
    edges_of_nodes([], [A, C], triplets)

    assert triplets == snapshot
    assert triplets[0].source == (A, B)

# --- EXCLUSIONS ---

def test_single_string_exclusion_is_one_name():
    triplets = [Triplet(A, "el", B), Triplet(A, "rel1", C)]
    assert edges_of_node("rel1", A, triplets) == [(A, "el", B)]
    assert edges_of_nodes("rel1", [A, B, C], triplets) == [(A, "el", B)]

def test_set_exclusion(node_triplets):
    assert edges_of_node({"rel1"}, A, node_triplets) == [(A, "rel2", C)]
