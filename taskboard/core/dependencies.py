"""
FastAPI dependencies shared by the routers.

The authenticated caller is resolved from a bearer token and handed to
endpoints as a CurrentUser; its id scopes every query and mutation.
"""

from typing import Callable, Optional, Type, TypeVar
from uuid import UUID

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.security import decode_token
from taskboard.db.session import get_db
from taskboard.errors import raise_app_error, unauthorized
from taskboard.repositories.user_repository import UserRepository
from taskboard.schemas.user import CurrentUser
from taskboard.schemas.validation import validate_input

__all__ = ["get_db", "get_current_user", "query_model"]

M = TypeVar("M", bound=BaseModel)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> CurrentUser:
    """
    Resolve the caller from the Authorization header.
    
    Raises:
        AppError: 401 for a missing, invalid or expired token, or a token
            whose user no longer exists. The reason is not disclosed.
    """
    if credentials is None:
        unauthorized()

    payload = decode_token(credentials.credentials)
    if not payload or not payload.get("sub"):
        unauthorized()

    try:
        user_id = UUID(str(payload["sub"]))
    except ValueError:
        unauthorized()

    user = await UserRepository(db).get_by_id(user_id)
    if user is None:
        unauthorized()

    return CurrentUser.model_validate(user)


def query_model(schema: Type[M]) -> Callable[[Request], M]:
    """
    Dependency factory validating the raw query string against `schema`.
    
    Unknown parameters are ignored; invalid ones produce a 400
    "Invalid query parameters" with the field errors.
    """
    def dependency(request: Request) -> M:
        result = validate_input(schema, dict(request.query_params))
        if not result.ok:
            raise_app_error(
                status.HTTP_400_BAD_REQUEST,
                "INVALID_QUERY",
                "Invalid query parameters",
                result.errors,
            )
        return result.data

    return dependency
