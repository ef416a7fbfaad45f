"""Page Route — title, subtitle and credit for the page chrome."""

from fastapi import APIRouter

from app.core.descriptor_catalog import (
    PAGE_CREDIT, PAGE_CREDIT_URL, PAGE_DESCRIPTION, PAGE_TITLE,
)
from app.schemas.descriptor import PageResponse

router = APIRouter(prefix="/api/v1", tags=["page"])


@router.get("/page", response_model=PageResponse)
async def get_page():
    return PageResponse(
        title=PAGE_TITLE,
        description=PAGE_DESCRIPTION,
        credit=PAGE_CREDIT,
        credit_url=PAGE_CREDIT_URL,
    )
