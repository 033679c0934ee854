# app/core/deps.py
from fastapi import Header, HTTPException, Query

from app.core.security import decode_access_token


def extract_token(
    token: str | None,
    authorization: str | None,
    x_auth_token: str | None = None,
) -> str | None:
    """
    Token por query (?token=), `Authorization: Bearer XXX` o `x-auth-token`.
    """
    if token:
        return token
    if authorization and authorization.lower().startswith("bearer "):
        return authorization.split(" ", 1)[1].strip() or None
    return x_auth_token or None


async def get_current_user_id(
    token: str | None = Query(None),
    authorization: str | None = Header(None),
    x_auth_token: str | None = Header(None),
) -> int:
    tok = extract_token(token, authorization, x_auth_token)
    if not tok:
        raise HTTPException(status_code=401, detail="missing token")
    try:
        return int(decode_access_token(tok))
    except Exception:
        raise HTTPException(status_code=401, detail="invalid token")
