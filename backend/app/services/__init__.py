"""Service Layer — orchestration between API routes and the pure core.

Invariants:
    - Services read the published search cache, they never build or mutate it
    - No HTTP types here: routes translate to/from schemas

Design Decisions:
    - Thin service functions over classes: there is no per-request state
"""
