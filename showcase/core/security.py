"""Security and authentication utilities."""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt
from fastapi import HTTPException, Request

from showcase.core import config
from showcase.core.constants import ADMIN_ROLE


def generate_visitor_id() -> str:
    """Mint a new opaque visitor id for an anonymous browser."""
    return str(uuid.uuid4())


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token.

    The login flow lives outside this service; it issues tokens with the same
    secret and a ``userId`` (and optionally ``role``) claim.
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=config.settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, config.settings.SECRET_KEY, algorithm=config.settings.ALGORITHM)
    return encoded_jwt


def get_bearer_token(request: Request) -> Optional[str]:
    """Extract the raw token from an ``Authorization: Bearer`` header."""
    auth_header = request.headers.get("authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        return None
    token = auth_header[len("Bearer "):].strip()
    return token or None


def decode_access_token(token: str) -> Optional[dict]:
    """Decode a JWT, returning None when it is invalid or expired."""
    try:
        return jwt.decode(token, config.settings.SECRET_KEY, algorithms=[config.settings.ALGORITHM])
    except jwt.PyJWTError:
        return None


def verify_user_token(request: Request) -> dict:
    """Verify the bearer JWT and return its payload; 401 when missing or invalid."""
    token = get_bearer_token(request)

    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    try:
        payload = jwt.decode(token, config.settings.SECRET_KEY, algorithms=[config.settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.PyJWTError:
        raise HTTPException(status_code=401, detail="Invalid token")

    if not payload.get("userId"):
        raise HTTPException(status_code=401, detail="Invalid token")
    return payload


def verify_admin_token(request: Request) -> dict:
    """Verify the bearer JWT and require the admin role."""
    payload = verify_user_token(request)
    if payload.get("role") != ADMIN_ROLE:
        raise HTTPException(status_code=403, detail="Not authorized")
    return payload
