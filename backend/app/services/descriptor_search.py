"""Descriptor Search — applies the configured case policy and orders results for cards.

Invariants:
    - Result set equals query_search_cache(text, cache, case_sensitive)
    - Results follow catalogue order; descriptors missing from the catalogue go last

Design Decisions:
    - Ordering happens here, not in core: the core result order is unspecified
"""

import logging
from collections.abc import Sequence

from app.core.descriptor import Descriptor
from app.core.search_cache import SearchCache, query_search_cache

logger = logging.getLogger(__name__)


def search_descriptors(
    cache: SearchCache,
    catalogue: Sequence[Descriptor],
    text: str,
    case_sensitive: bool,
) -> list[Descriptor]:
    """Resolve text against the cache, in catalogue order."""
    matches = query_search_cache(text, cache, case_sensitive=case_sensitive)
    position = {id(d): i for i, d in enumerate(catalogue)}
    matches.sort(key=lambda d: position.get(id(d), len(position)))
    logger.debug(
        "Search resolved",
        extra={"query_length": len(text), "result_count": len(matches)},
    )
    return matches
