"""Infrastructure Layer — cross-cutting concerns for the shell.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
