"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - All database failures mapped to DatabaseError before leaving this layer
"""
