"""Core Layer — pure request-shaping logic, no IO, no async.

Invariants:
    - No module in core/ imports from infrastructure/ or api/
    - All functions are pure and deterministic

Design Decisions:
    - Path and query building separated from the HTTP executor so both are unit-testable without a transport
"""
