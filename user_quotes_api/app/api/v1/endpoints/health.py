"""Health endpoint for API v1."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from user_quotes_api.app.api.deps import get_user_service
from user_quotes_api.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
def health(service: UserService = Depends(get_user_service)) -> Dict[str, Any]:
    """Report liveness together with the number of stored users.

    Counting goes through the repository, so a broken database shows up
    here as a 503.
    """
    return {"status": "ok", "users": service.count_users()}
