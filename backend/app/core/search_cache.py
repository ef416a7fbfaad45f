"""Search Cache — keyword inverted index over descriptors, built once, queried by substring.

Invariants:
    - Pure: no IO, no async, no global state
    - keywords and index keys are the same set; every descriptor set is non-empty
    - A descriptor appears at most once per keyword (frozenset, identity hashing)
    - keywords keeps first-insertion order, stable within one cache instance
    - No update API: a changed descriptor list means a full rebuild
    - build and query never raise

Design Decisions:
    - Linear scan over distinct keywords instead of n-grams/tries: the catalogue is
      small and fixed, and substring containment needs no extra structure
    - Case-sensitive by default: the query text is compared as given against
      lowercased keywords; case_sensitive=False lowercases the query first
    - Empty query matches every keyword and therefore returns every descriptor
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from app.core.descriptor import Descriptor
from app.core.domain_types import Keyword
from app.core.search_keywords import keywords_for, normalize_keyword


@dataclass(frozen=True)
class SearchCache:
    """Immutable inverted index plus its flat keyword list."""
    index: Mapping[Keyword, frozenset[Descriptor]]
    keywords: tuple[Keyword, ...]

    @property
    def descriptor_count(self) -> int:
        return len({d for descriptors in self.index.values() for d in descriptors})

    def query(self, text: str, case_sensitive: bool = True) -> list[Descriptor]:
        return query_search_cache(text, self, case_sensitive=case_sensitive)


def build_search_cache(descriptors: Iterable[Descriptor]) -> SearchCache:
    """Index every descriptor under each of its keywords."""
    sets: dict[Keyword, set[Descriptor]] = {}
    for descriptor in descriptors:
        for keyword in keywords_for(descriptor):
            sets.setdefault(keyword, set()).add(descriptor)

    index = {keyword: frozenset(members) for keyword, members in sets.items()}
    return SearchCache(
        index=MappingProxyType(index),
        keywords=tuple(index),
    )


def query_search_cache(
    text: str,
    cache: SearchCache,
    case_sensitive: bool = True,
) -> list[Descriptor]:
    """Descriptors whose keywords contain text. Deduplicated, order unspecified."""
    needle = text if case_sensitive else normalize_keyword(text)
    results: set[Descriptor] = set()
    for keyword in cache.keywords:
        if needle in keyword:
            results |= cache.index[keyword]
    return list(results)
