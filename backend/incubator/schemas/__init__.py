"""
Incubator Backend — Pydantic Schemas
======================================

API contracts, kept separate from the ORM models so the wire format
(camelCase, reduced public views, write-only passwords) can differ from
storage.
"""
