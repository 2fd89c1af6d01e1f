"""Pydantic Schemas — response shapes validated at the client boundary.

Invariants:
    - Every schema subclasses APIModel: unknown backend fields are kept, not rejected
    - Fields the backend may omit are optional with a default

Design Decisions:
    - One module per capability, mirroring api/ namespaces
    - Schemas describe responses only; request filters are keyword arguments
"""
