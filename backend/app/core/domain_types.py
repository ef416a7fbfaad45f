"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - DescriptorId is the stable slug of a descriptor ("array", "linked-list")
    - Keyword is always lowercase when it reaches the search index
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DescriptorId = NewType("DescriptorId", str)


# ─── Value Types ─────────────────────────────────────────────────

Keyword = NewType("Keyword", str)


# ─── Enums ───────────────────────────────────────────────────────

class LogFormat(str, Enum):
    """Supported log output formats."""
    JSON = "json"
    TEXT = "text"
