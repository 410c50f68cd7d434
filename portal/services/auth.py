"""
Registration and login.

There is no credential check: a login succeeds for any password as long as
a user with that email and role exists.
"""
from typing import Optional

from sqlalchemy.orm import Session

from portal.core.exceptions import EmailInUseError, InvalidCredentialsError
from portal.core.security import create_session_token, decode_session_token
from portal.models.user import User, UserRole
from portal.services.base import BaseService


class AuthService(BaseService):
    def register(self, name: str, email: str, role: UserRole) -> User:
        if self.get_by_email(email):
            raise EmailInUseError()

        user = User(name=name, email=email, role=role)
        self.db.add(user)
        self.commit()
        self.db.refresh(user)
        self.log_info(f"Registered {role.value} user {user.id}")
        return user

    def login(self, email: str, role: UserRole) -> User:
        user = self.db.query(User).filter(User.email == email, User.role == role).first()
        if not user:
            self.log_warning("Login rejected", email=email, role=role.value)
            raise InvalidCredentialsError()
        return user

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def user_from_token(self, token: Optional[str]) -> Optional[User]:
        if not token:
            return None
        payload = decode_session_token(token)
        if payload is None:
            return None
        user_id = payload.get("user_id")
        if user_id is None:
            return None
        return self.db.get(User, user_id)

    @staticmethod
    def issue_token(user: User) -> str:
        return create_session_token(user.id, user.email, user.role.value)
