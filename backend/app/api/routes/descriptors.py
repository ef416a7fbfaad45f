"""Descriptor Routes — catalogue listing, lookup by id, and keyword search.

Invariants:
    - Listing and search results follow catalogue order
    - Unknown descriptor id → ResourceNotFoundError (404 envelope)
    - q defaults to "" which returns every descriptor

Design Decisions:
    - Case policy and query length limit come from the injected settings, not
      from import-time defaults: one behavior per deployment, overridable in tests
    - Over-long q raised as RequestValidationError so it shares the 400 envelope
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError

from app.api.dependencies import get_catalogue, get_search_cache
from app.config import Settings, get_settings
from app.core.descriptor import Descriptor
from app.core.descriptor_catalog import find_descriptor
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.core.search_cache import SearchCache
from app.schemas.descriptor import DescriptorResponse, SearchResponse
from app.services.descriptor_search import search_descriptors

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["descriptors"])


@router.get("/descriptors", response_model=list[DescriptorResponse])
async def list_descriptors(catalogue: list[Descriptor] = Depends(get_catalogue)):
    """All descriptors, in card order."""
    return [DescriptorResponse.from_descriptor(d) for d in catalogue]


@router.get("/descriptors/{descriptor_id}", response_model=DescriptorResponse)
async def get_descriptor(
    descriptor_id: str, catalogue: list[Descriptor] = Depends(get_catalogue),
):
    descriptor = find_descriptor(catalogue, descriptor_id)
    if descriptor is None:
        raise ResourceNotFoundError(
            "Descriptor", descriptor_id, ErrorContext(descriptor_id=descriptor_id),
        )
    return DescriptorResponse.from_descriptor(descriptor)


@router.get("/search", response_model=SearchResponse)
async def search(
    q: str = Query(""),
    cache: SearchCache = Depends(get_search_cache),
    catalogue: list[Descriptor] = Depends(get_catalogue),
    settings: Settings = Depends(get_settings),
):
    """Resolve free text into descriptors by keyword substring."""
    _check_query_length(q, settings.search_max_query_length)
    results = search_descriptors(
        cache, catalogue, q, settings.search_case_sensitive,
    )
    return SearchResponse(
        query=q,
        total=len(results),
        results=[DescriptorResponse.from_descriptor(d) for d in results],
    )


def _check_query_length(q: str, max_length: int) -> None:
    if len(q) > max_length:
        raise RequestValidationError([{
            "loc": ("query", "q"),
            "msg": f"String should have at most {max_length} characters",
            "type": "string_too_long",
        }])
