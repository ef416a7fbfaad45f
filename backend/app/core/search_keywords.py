"""Search Keywords — derives the lowercase keyword list for one descriptor.

Invariants:
    - Pure function: no IO, no state
    - Order: name, alternate name, aliases (list order), search keywords (list order)
    - Duplicates kept here; the search cache collapses them into set keys
    - Same folding (str.lower) used for index keys and query normalization
"""

from app.core.descriptor import Descriptor
from app.core.domain_types import Keyword


def normalize_keyword(text: str) -> Keyword:
    return Keyword(text.lower())


def keywords_for(descriptor: Descriptor) -> list[Keyword]:
    """All search keywords of a descriptor, lowercased, in derivation order."""
    keywords = [normalize_keyword(descriptor.name)]
    if descriptor.alternate_name:
        keywords.append(normalize_keyword(descriptor.alternate_name))
    keywords.extend(normalize_keyword(alias) for alias in descriptor.also_known_as)
    keywords.extend(normalize_keyword(kw) for kw in descriptor.search_keywords)
    return keywords
