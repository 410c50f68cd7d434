"""
Auth dependencies.
Resolve the caller from the bearer token and enforce the HR / student split.
"""
import logging
from typing import Callable, List, Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from portal.core.exceptions import AccessDeniedError, NotAuthenticatedError
from portal.database import get_db
from portal.models.user import User, UserRole
from portal.services.auth import AuthService

logger = logging.getLogger(__name__)

# auto_error=False so a missing token surfaces as NotAuthenticatedError
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_optional_user(
    token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)
) -> Optional[User]:
    return AuthService(db).user_from_token(token)


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        logger.info("Authentication failed: missing or invalid session token")
        raise NotAuthenticatedError()
    return user


def require_role(allowed_roles: List[UserRole]) -> Callable:
    """
    Dependency factory that checks if the user has one of the allowed roles.

    Usage:
        @router.post("/jobs")
        def create(user: User = Depends(require_role([UserRole.HR]))):
            ...
    """
    def role_checker(current_user: User = Depends(get_current_user)):
        if current_user.role not in allowed_roles:
            raise AccessDeniedError(
                f"Access denied. Required roles: {[r.value for r in allowed_roles]}"
            )
        return current_user
    return role_checker


require_hr = require_role([UserRole.HR])
require_student = require_role([UserRole.STUDENT])
