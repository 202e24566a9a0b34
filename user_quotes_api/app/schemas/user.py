"""
Pydantic models for user data.

``UserDto`` is the single transfer shape used for both request bodies
and responses.  On input only ``name``, ``username`` and ``email`` are
meaningful; ``id`` and ``quote`` are accepted but dropped when the DTO
is converted to an entity.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..entities.user import UserEntity


class UserDto(BaseModel):
    """Schema for creating and reading users."""

    id: int = Field(0, description="Identifier assigned by the service; ignored on create")
    name: str = Field(..., description="Display name", examples=["James"])
    username: str = Field(..., description="Login name", examples=["james"])
    email: str = Field(..., description="Contact e-mail address", examples=["james@mail.com"])
    quote: Optional[str] = Field(None, description="Quote fetched at read time; ignored on create")

    model_config = {
        "from_attributes": True,
    }

    def to_entity(self) -> UserEntity:
        """Build an unsaved entity, discarding ``id`` and ``quote``."""
        return UserEntity(name=self.name, username=self.username, email=self.email)

    @classmethod
    def from_entity(cls, entity: UserEntity) -> "UserDto":
        return cls(
            id=entity.id,
            name=entity.name,
            username=entity.username,
            email=entity.email,
            quote=entity.quote,
        )
