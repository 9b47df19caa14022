"""
Authentication service: registration, credential checks and tokens.
"""

import logging
from typing import Optional

from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.security import create_access_token, verify_password
from taskboard.errors import raise_app_error
from taskboard.models.user import User
from taskboard.repositories.user_repository import UserRepository
from taskboard.schemas.user import CurrentUser, LoginRequest, LoginResponse, RegisterRequest

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication logic."""
    
    def __init__(self, db: AsyncSession):
        self.users = UserRepository(db)
    
    async def register(self, data: RegisterRequest) -> User:
        """
        Create an account.
        
        Raises:
            AppError: 409 if the (lowercased) email is already registered
        """
        if await self.users.get_by_email(data.email):
            raise_app_error(
                status.HTTP_409_CONFLICT,
                "EMAIL_TAKEN",
                "User with this email already exists",
            )
        return await self.users.create(data)
    
    async def authenticate(self, credentials: LoginRequest) -> Optional[User]:
        """
        Check credentials.
        
        Returns None for an unknown email and for a wrong password alike.
        """
        user = await self.users.get_by_email(credentials.email)
        if user is None or not verify_password(credentials.password, user.hashed_password):
            logger.info("Failed login for %s", credentials.email)
            return None
        return user
    
    def issue_token(self, user: CurrentUser) -> LoginResponse:
        """Issue a fresh session token for `user`."""
        token = create_access_token({"sub": str(user.id)})
        return LoginResponse(access_token=token, token_type="bearer", user=user)
    
    async def login(self, credentials: LoginRequest) -> Optional[LoginResponse]:
        """Authenticate and issue a token, or return None."""
        user = await self.authenticate(credentials)
        if user is None:
            return None
        return self.issue_token(CurrentUser.model_validate(user))
