# app/deps/auth.py
import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose.exceptions import ExpiredSignatureError, JWTError

from app.security import decode_token

log = logging.getLogger("uvicorn")

# auto_error=False: a missing header resolves to "no user" instead of a 403
bearer_scheme = HTTPBearer(auto_error=False)

def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """Resolve the caller's opaque user id, or None when there is no valid session."""
    if credentials is None:
        return None
    try:
        payload = decode_token(credentials.credentials)
    except ExpiredSignatureError:
        log.info("rejected expired token")
        return None
    except JWTError:
        return None
    sub = payload.get("sub")
    if not sub:
        return None
    return str(sub)

def require_user_id(user_id: Optional[str] = Depends(get_current_user_id)) -> str:
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
