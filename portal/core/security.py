"""
Session tokens.

Logins are not password-checked, so a token only carries who the caller
claims to be. Tokens are signed so they cannot be edited client-side, and
timestamped so they stop working after ACCESS_TOKEN_EXPIRE_MINUTES.
"""
import logging
from typing import Any, Dict, Optional

from itsdangerous import BadData, SignatureExpired, URLSafeTimedSerializer

from portal.core.config import settings

logger = logging.getLogger(__name__)

_serializer = URLSafeTimedSerializer(settings.secret_key, salt="session")


def create_session_token(user_id: int, email: str, role: str) -> str:
    return _serializer.dumps({"user_id": user_id, "email": email, "role": role})


def decode_session_token(token: str, max_age: Optional[int] = None) -> Optional[Dict[str, Any]]:
    """Return the token payload, or None when it is expired or fails verification."""
    if max_age is None:
        max_age = settings.access_token_expire_minutes * 60
    try:
        return _serializer.loads(token, max_age=max_age)
    except SignatureExpired:
        logger.info("Rejected expired session token")
        return None
    except BadData:
        logger.warning("Rejected session token that failed verification")
        return None
