"""Infrastructure Layer — store client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All store calls wrapped with timeout/retry config and error mapping
"""
