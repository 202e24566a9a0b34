"""
Domain entities.

Entities are the records owned by the repositories.  They are kept
separate from the Pydantic schemas in ``schemas`` so that storage
representation and API representation can evolve independently.
"""

from .user import UserEntity

__all__ = ["UserEntity"]
