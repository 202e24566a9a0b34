"""
Pydantic schema definitions for API payloads.

Schemas are separated from the entities in ``entities`` to decouple
API representation from persistence.
"""
