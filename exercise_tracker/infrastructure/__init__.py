"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from core/ domain logic other than core/errors
"""
