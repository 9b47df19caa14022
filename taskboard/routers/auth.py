"""
Authentication router for registration, login and session renewal.
"""

from fastapi import APIRouter, Body, Depends, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.dependencies import get_current_user, get_db
from taskboard.errors import raise_app_error
from taskboard.schemas.base import ApiResponse, success_response
from taskboard.schemas.user import CurrentUser, LoginRequest, LoginResponse, RegisterRequest, UserRead
from taskboard.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])

INVALID_CREDENTIALS = "Invalid email or password"


@router.post(
    "/register",
    response_model=ApiResponse[UserRead],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    data: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new user.
    
    The email is stored lowercase; registering an email that already
    exists (in any letter case) returns 409.
    """
    auth_service = AuthService(db)
    user = await auth_service.register(data)
    await db.commit()
    return success_response(user)


@router.post("/login", response_model=ApiResponse[LoginResponse], response_model_exclude_unset=True)
async def login(
    payload: dict = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """
    Authenticate user and return a JWT access token.
    
    Any failure, including a malformed payload, is the same generic 401.
    """
    try:
        credentials = LoginRequest.model_validate(payload)
    except ValidationError:
        credentials = None

    result = None
    if credentials is not None:
        result = await AuthService(db).login(credentials)

    if result is None:
        raise_app_error(status.HTTP_401_UNAUTHORIZED, "INVALID_CREDENTIALS", INVALID_CREDENTIALS)

    return success_response(result)


@router.post("/refresh", response_model=ApiResponse[LoginResponse], response_model_exclude_unset=True)
async def refresh_token(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Issue a new token with a fresh expiry for the current session."""
    return success_response(AuthService(db).issue_token(current_user))


@router.get("/me", response_model=ApiResponse[CurrentUser], response_model_exclude_unset=True)
async def get_current_user_info(
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Get information about the currently authenticated user.
    """
    return success_response(current_user)
