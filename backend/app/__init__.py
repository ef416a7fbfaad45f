"""Data Structure Zoo Application Package — descriptor catalogue and search.

Invariants:
    - Package root holds only the version string (import side-effects prohibited)

Design Decisions:
    - No star exports: explicit imports only
"""

__version__ = "0.1.0"
