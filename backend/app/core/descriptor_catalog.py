"""Descriptor Catalogue — built-in dataset, page metadata and descriptor validation.

Invariants:
    - All entries are pure data (no IO)
    - Every built-in descriptor passes validate_descriptors()
    - Catalogue order is the presentation order of cards

Design Decisions:
    - Validation lives with the data, not in the search cache: the cache accepts
      anything, the loader refuses to hand it a broken list
    - Portuguese copy kept verbatim, the zoo is a pt-BR page
"""

from collections.abc import Sequence

from app.core.descriptor import Descriptor
from app.core.domain_types import DescriptorId
from app.core.errors import ErrorContext, InvalidDescriptorError


# ─── Page Metadata ───────────────────────────────────────────────

PAGE_TITLE = "Zoológico de Estruturas de Dados"
PAGE_DESCRIPTION = "Aprenda estruturas de dados interativamente"
PAGE_CREDIT = "Feito com ☕ por coproduto"
PAGE_CREDIT_URL = "https://twitter.com/coproduto"


# ─── Built-in Descriptors ────────────────────────────────────────

DATA_STRUCTURE_DATA: tuple[Descriptor, ...] = (
    Descriptor(
        id=DescriptorId("array"),
        name="Arranjo",
        alternate_name="Array",
        description="Itens do mesmo tipo em um bloco de comprimento definido",
        also_known_as=("Vetor", "Lista"),
    ),
    Descriptor(
        id=DescriptorId("record"),
        name="Registro",
        alternate_name="Record",
        description=(
            "Itens de tipos possivelmente diferentes em um bloco estruturado"
        ),
        also_known_as=("Struct", "Structure", "Estrutura"),
    ),
    Descriptor(
        id=DescriptorId("linked-list"),
        name="Lista encadeada",
        description=(
            "Sequência de nós estruturados que pode crescer dinamicamente"
        ),
    ),
)


# ─── Validation ──────────────────────────────────────────────────

def validate_descriptors(descriptors: Sequence[Descriptor]) -> None:
    """Raise InvalidDescriptorError on empty name/id or duplicate id."""
    seen: set[str] = set()
    for position, descriptor in enumerate(descriptors):
        ctx = ErrorContext(
            descriptor_id=descriptor.id or None,
            debug_info={"position": position},
        )
        if not descriptor.id.strip():
            raise InvalidDescriptorError(
                f"Descriptor at position {position} has an empty id",
                "id", ctx,
            )
        if not descriptor.name.strip():
            raise InvalidDescriptorError(
                f"Descriptor '{descriptor.id}' has an empty name",
                "name", ctx,
            )
        if descriptor.id in seen:
            raise InvalidDescriptorError(
                f"Duplicate descriptor id '{descriptor.id}'",
                "id", ctx,
            )
        seen.add(descriptor.id)


def find_descriptor(
    descriptors: Sequence[Descriptor], descriptor_id: str,
) -> Descriptor | None:
    return next((d for d in descriptors if d.id == descriptor_id), None)
