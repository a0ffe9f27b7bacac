"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store so that the API representation of
a student can evolve independently of how it is held in memory.
"""
