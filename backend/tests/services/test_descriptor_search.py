"""Descriptor Search service — case policy and catalogue ordering.

Invariants:
    - Same result set as the core query for the chosen case policy
    - Results ordered as in the catalogue
"""

from app.core.search_cache import build_search_cache
from app.services.descriptor_search import search_descriptors


def test_results_follow_catalogue_order(catalogue):
    cache = build_search_cache(catalogue)
    results = search_descriptors(cache, catalogue, "", case_sensitive=True)
    assert [d.id for d in results] == ["array", "record", "linked-list"]


def test_lista_in_catalogue_order(catalogue):
    cache = build_search_cache(catalogue)
    results = search_descriptors(cache, catalogue, "lista", case_sensitive=True)
    assert [d.id for d in results] == ["array", "linked-list"]


def test_case_sensitive_policy_misses_capitalized_query(catalogue):
    cache = build_search_cache(catalogue)
    assert search_descriptors(cache, catalogue, "Lista", case_sensitive=True) == []


def test_case_insensitive_policy_matches_capitalized_query(catalogue):
    cache = build_search_cache(catalogue)
    results = search_descriptors(cache, catalogue, "Lista", case_sensitive=False)
    assert [d.id for d in results] == ["array", "linked-list"]


def test_structure_alias_reaches_record_only(catalogue):
    cache = build_search_cache(catalogue)
    results = search_descriptors(cache, catalogue, "struct", case_sensitive=True)
    assert [d.id for d in results] == ["record"]
