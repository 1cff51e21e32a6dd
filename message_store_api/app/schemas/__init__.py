"""
Pydantic schema definitions for API payloads.

Schemas double as the in‑process record type of the store, so the
values handed to HTTP handlers and to direct callers are the same
immutable objects.
"""
