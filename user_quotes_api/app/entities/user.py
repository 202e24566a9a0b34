"""User entity as held by the repositories."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class UserEntity:
    """A persisted user record.

    ``id`` is ``0`` until the repository assigns one on first save.
    ``quote`` is never stored meaningfully; readers always receive a
    freshly fetched quote from the service layer instead.
    """

    name: str
    username: str
    email: str
    id: int = 0
    quote: Optional[str] = None
