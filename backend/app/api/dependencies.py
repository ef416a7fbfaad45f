"""Request Dependencies — hand routes the state published by the lifespan.

Invariants:
    - The search cache is built once in the lifespan and only read here
    - Reading before publication is a 503 (readiness), never a rebuild

Design Decisions:
    - app.state over a module-level global: no hidden import-time initialization
"""

from fastapi import HTTPException, Request, status

from app.core.descriptor import Descriptor
from app.core.search_cache import SearchCache


def get_search_cache(request: Request) -> SearchCache:
    cache = getattr(request.app.state, "search_cache", None)
    if cache is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Search index not ready",
        )
    return cache


def get_catalogue(request: Request) -> list[Descriptor]:
    return getattr(request.app.state, "descriptors", [])
