"""Bearer-token authentication for API routes."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Header, HTTPException

from config.settings import settings
from utils.logger import setup_logger

logger = setup_logger(__name__)

USER_ID_CLAIM = "userId"


def create_access_token(user_id: str, expires_in: Optional[timedelta] = None) -> str:
    """Sign a token carrying the user id claim."""
    expires_in = expires_in or timedelta(minutes=settings.jwt_expiry_minutes)
    payload = {
        USER_ID_CLAIM: user_id,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> str:
    """Verify a token and return its user id. Raises jwt.InvalidTokenError."""
    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    user_id = payload.get(USER_ID_CLAIM)
    if not user_id or not isinstance(user_id, str):
        raise jwt.InvalidTokenError(f"Missing '{USER_ID_CLAIM}' claim")
    return user_id


async def get_current_user_id(authorization: Optional[str] = Header(None)) -> str:
    """Resolve the authenticated user id from the Authorization header."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Access denied. No token provided.")

    try:
        return decode_access_token(token.strip())
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected token: {e}")
        raise HTTPException(status_code=403, detail="Invalid token")
