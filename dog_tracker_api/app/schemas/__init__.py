"""
Pydantic schema definitions for API payloads.

Schemas are separated from the database rows so the API
representation of a dog can evolve independently of the table layout.
"""
