"""Infrastructure Layer — IO edges and cross-cutting concerns.

Invariants:
    - Infrastructure converts raw input into core types, never the other way round
    - File and parse failures mapped to ZooError subclasses

Design Decisions:
    - Loader + logging only: the zoo has no database or external API
"""
