"""
FastAPI dependencies.

The ``UserService`` is built once by ``create_app`` and stored on
``app.state``; handlers obtain it through ``get_user_service`` instead
of reaching for module level globals.
"""

from fastapi import Request

from ..services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service
