# Copyright (c) 2025 Varshith Gudur. Licensed under AGPLv3.
import pytest

from ermtools import parse_entity_relationship_triplets

from big_bank import BIG_BANK_ERM

# --- FIXTURES ---

@pytest.fixture
def big_bank_triplets():
    return parse_entity_relationship_triplets(BIG_BANK_ERM)

@pytest.fixture(autouse=True)
def _permissive_env(monkeypatch):
    # Tests opt into strict mode explicitly
    monkeypatch.delenv("ERMTOOLS_STRICT", raising=False)
