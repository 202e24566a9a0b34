"""
User endpoints for API v1.

Create a user, fetch one by id and list users page by page with
optional name/username prefix filters.  Every user returned by these
routes carries a quote fetched from the quote provider for this very
request.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from user_quotes_api.app.api.deps import get_user_service
from user_quotes_api.app.core.config import settings
from user_quotes_api.app.core.exceptions import InvalidArgumentError
from user_quotes_api.app.schemas.user import UserDto
from user_quotes_api.app.services.user_service import UserService, build_filter

router = APIRouter()


@router.post("", response_model=int)
def create_user(user: UserDto, service: UserService = Depends(get_user_service)) -> int:
    """Register a new user and return its id.

    ``id`` and ``quote`` in the body are ignored.  The response body is
    the bare numeric id.
    """
    try:
        saved = service.add_user(user.to_entity())
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return saved.id


@router.get("/{user_id}", response_model=UserDto)
def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserDto:
    """Retrieve a single user by id.

    Returns HTTP 404 if the user does not exist.
    """
    user = service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("", response_model=List[UserDto])
def list_users(
    page: int = Query(0, description="Zero-based page number"),
    size: int = Query(settings.default_page_size, description="Number of users per page"),
    name: Optional[str] = Query(None, description="Case-sensitive prefix of the user's name"),
    username: Optional[str] = Query(None, description="Case-sensitive prefix of the username"),
    service: UserService = Depends(get_user_service),
) -> List[UserDto]:
    """Return a page of users in creation order.

    ``page`` and ``size`` are validated by the service rather than by
    ``Query`` constraints so that negative values yield 400, not 422.
    """
    try:
        return service.get_users(page, size, build_filter(name, username))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
