"""Descriptor — immutable record describing one data structure in the zoo.

Invariants:
    - Frozen after construction: the search layer only ever references descriptors
    - Equality and hashing are by identity, so a descriptor is one set member
      no matter how many keywords reach it
    - Optional sequences are tuples (never None) once constructed

Design Decisions:
    - dataclass(eq=False) over pydantic: core stays free of validation machinery,
      pydantic lives at the boundary in schemas/
"""

from dataclasses import dataclass

from app.core.domain_types import DescriptorId


@dataclass(frozen=True, eq=False)
class Descriptor:
    """A described data-structure entry (name, aliases, description)."""
    id: DescriptorId
    name: str
    description: str
    alternate_name: str | None = None
    also_known_as: tuple[str, ...] = ()
    search_keywords: tuple[str, ...] = ()


def render_descriptor_name(descriptor: Descriptor) -> str:
    """Card title: name followed by the alternate name in parentheses."""
    if descriptor.alternate_name:
        return f"{descriptor.name} ({descriptor.alternate_name})"
    return descriptor.name
