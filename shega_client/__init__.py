"""Shega Analytics Client — typed async access to the news analytics API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Explicit imports only: callers import from shega_client.api / shega_client.config
"""
