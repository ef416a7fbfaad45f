"""Descriptor Schemas — Pydantic models for descriptor files and API responses.

Invariants:
    - DescriptorRecord.id and .name: stripped, non-empty; description required
    - Optional fields: missing and null mean the same thing
    - File keys are camelCase (alternateName, alsoKnownAs, searchKeywords);
      snake_case accepted too via populate_by_name
    - DescriptorResponse.display_name rendered by core, never by the client

Design Decisions:
    - Aliases over a custom parser: descriptor files keep the shape of the
      descriptor literal the page was first written with
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.descriptor import Descriptor, render_descriptor_name
from app.core.domain_types import DescriptorId


class DescriptorRecord(BaseModel):
    """One descriptor as stored in a descriptor JSON file."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str
    alternate_name: str | None = Field(None, alias="alternateName")
    also_known_as: list[str] = Field(default_factory=list, alias="alsoKnownAs")
    search_keywords: list[str] = Field(default_factory=list, alias="searchKeywords")

    @field_validator("also_known_as", "search_keywords", mode="before")
    @classmethod
    def null_list_is_empty(cls, v: list[str] | None) -> list[str]:
        return [] if v is None else v

    @field_validator("id", "name")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v

    def to_descriptor(self) -> Descriptor:
        return Descriptor(
            id=DescriptorId(self.id),
            name=self.name,
            description=self.description,
            alternate_name=self.alternate_name,
            also_known_as=tuple(self.also_known_as),
            search_keywords=tuple(self.search_keywords),
        )


class DescriptorResponse(BaseModel):
    """Descriptor card data for the presentation layer."""
    id: str
    name: str
    display_name: str
    description: str
    alternate_name: str | None = None
    also_known_as: list[str] = []
    search_keywords: list[str] = []

    @classmethod
    def from_descriptor(cls, descriptor: Descriptor) -> "DescriptorResponse":
        return cls(
            id=descriptor.id,
            name=descriptor.name,
            display_name=render_descriptor_name(descriptor),
            description=descriptor.description,
            alternate_name=descriptor.alternate_name,
            also_known_as=list(descriptor.also_known_as),
            search_keywords=list(descriptor.search_keywords),
        )


class SearchResponse(BaseModel):
    """Search results — deduplicated descriptors in catalogue order."""
    query: str
    total: int
    results: list[DescriptorResponse]


class PageResponse(BaseModel):
    """Page chrome: title, subtitle and author credit."""
    title: str
    description: str
    credit: str
    credit_url: str
