from __future__ import annotations

import logging
import uuid
from jose import jwt
from jose.exceptions import JWTError, ExpiredSignatureError
from fastapi import HTTPException, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from typing import Any, Dict, Optional
from burnscale.core.config import settings

logger = logging.getLogger(__name__)
bearer = HTTPBearer(auto_error=False)

DEV_USER_ID = "123e4567-e89b-12d3-a456-426614174000"
DEV_BYPASS_TOKENS = {"dev-bypass", "test", "dev"}


def _dev_user() -> Dict[str, Any]:
    return {"user_id": DEV_USER_ID, "role": "authenticated", "email": None}


def verify_supabase_token(token: str) -> Dict[str, Any]:
    """
    Verify a Supabase-issued JWT and return the caller identity.
    """
    try:
        if settings.SUPABASE_JWT_SECRET:
            payload = jwt.decode(
                token,
                settings.SUPABASE_JWT_SECRET,
                algorithms=["HS256"],
                audience=settings.JWT_AUDIENCE,
            )
        elif settings.APP_ENV == "dev":
            logger.warning("No JWT secret configured, using unverified token decode")
            payload = jwt.get_unverified_claims(token)
        else:
            raise HTTPException(status_code=500, detail="Authentication is not configured")
    except ExpiredSignatureError as exc:
        raise HTTPException(status_code=401, detail="Token has expired") from exc
    except JWTError as e:
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}") from e

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing user ID")
    try:
        uuid.UUID(user_id)
    except ValueError as e:
        raise HTTPException(status_code=401, detail="Token subject is not a user ID") from e

    return {
        "user_id": user_id,
        "role": payload.get("role", "authenticated"),
        "email": payload.get("email"),
    }


async def get_current_user(creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer)) -> Dict[str, Any]:
    """
    Resolve the caller from the bearer token; dev mode falls back to a fixed user.
    """
    if settings.APP_ENV == "dev":
        if not creds:
            logger.info("No credentials in dev mode, using dev user")
            return _dev_user()
        if creds.credentials in DEV_BYPASS_TOKENS:
            logger.info("Dev bypass token used")
            return _dev_user()

    if not creds or creds.scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Missing Authorization header")

    return verify_supabase_token(creds.credentials)
