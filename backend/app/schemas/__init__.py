"""Pydantic Schemas — request/response validation for API endpoints and descriptor files.

Invariants:
    - Schemas validate at system boundary (descriptor files, API responses)
    - Core types (Descriptor) never leak pydantic; conversion happens here

Design Decisions:
    - Separate from core: schemas are wire contracts, core dataclasses are the domain
"""
