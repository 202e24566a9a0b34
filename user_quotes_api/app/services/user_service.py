"""
Business logic for users.

``UserService`` wraps a user repository and a quote client.  Writes go
straight to the repository; reads are enriched with a freshly fetched
quote per returned record.  Quotes are display‑time decoration only:
they are never written back and only the records of the requested
page are enriched, so the provider is called once per listed user.
"""

import logging
from typing import Callable, List, Optional

from ..clients.quote_client import QuoteClient
from ..core.exceptions import InvalidArgumentError
from ..entities.user import UserEntity
from ..repositories.base import Repository
from ..schemas.user import UserDto

logger = logging.getLogger(__name__)

UserPredicate = Callable[[UserEntity], bool]


def accept_all(entity: UserEntity) -> bool:
    return True


def build_filter(name: Optional[str] = None, username: Optional[str] = None) -> UserPredicate:
    """Return a predicate matching users by case‑sensitive name prefixes.

    A missing ``name`` or ``username`` matches every value of that
    field; with neither supplied the predicate accepts all users.
    """
    name_prefix = name or ""
    username_prefix = username or ""

    def predicate(entity: UserEntity) -> bool:
        return entity.name.startswith(name_prefix) and entity.username.startswith(username_prefix)

    return predicate


class UserService:
    """Create, look up and list users, decorating reads with quotes."""

    def __init__(self, repository: Repository[UserEntity, int], quote_client: QuoteClient) -> None:
        self.repository = repository
        self.quote_client = quote_client

    def add_user(self, entity: UserEntity) -> UserEntity:
        """Persist a new user and return it with its id populated.

        The quote provider is not consulted on writes.
        """
        saved = self.repository.save(entity)
        logger.info("Registered user %s (%s)", saved.id, saved.username)
        return saved

    def get_user(self, user_id: int) -> Optional[UserDto]:
        """Return the user with a fresh quote, or ``None`` if it does not exist."""
        entity = self.repository.find_by_id(user_id)
        if entity is None:
            return None
        return self._enrich(entity)

    def get_users(self, page: int, size: int, predicate: Optional[UserPredicate] = None) -> List[UserDto]:
        """Return one page of users, each decorated with its own quote.

        Raises ``InvalidArgumentError`` for a negative ``page`` or
        ``size`` before the repository is consulted.
        """
        if page < 0:
            raise InvalidArgumentError(f"page must not be negative, got {page}")
        if size < 0:
            raise InvalidArgumentError(f"size must not be negative, got {size}")
        entities = self.repository.find_all(predicate or accept_all, page, size)
        return [self._enrich(entity) for entity in entities]

    def count_users(self) -> int:
        return self.repository.count()

    def _enrich(self, entity: UserEntity) -> UserDto:
        dto = UserDto.from_entity(entity)
        dto.quote = self.quote_client.get_quote()
        return dto
