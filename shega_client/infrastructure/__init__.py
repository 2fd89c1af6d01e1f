"""Infrastructure Layer — HTTP transport, caching and logging.

Invariants:
    - Infrastructure never imports from api/ namespaces
    - Every outbound call passes through APIClient.request

Design Decisions:
    - One executor wraps the raw httpx client: error mapping lives in exactly one place
"""
