"""Administrative access gate for write endpoints."""

from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from .config import ADMIN_PASS, ADMIN_USER

security = HTTPBasic(auto_error=False)


def check_admin_credentials(username: str, password: str) -> bool:
    """Compare credentials against the configured admin account."""

    ok_user = secrets.compare_digest(username or "", ADMIN_USER)
    ok_pass = secrets.compare_digest(password or "", ADMIN_PASS)
    return ok_user and ok_pass


def require_admin(
    request: Request,
    credentials: Optional[HTTPBasicCredentials] = Depends(security),
) -> str:
    """Allow admin sessions or matching HTTP Basic credentials."""

    if request.session.get("role") == "admin":
        return request.session.get("name") or ADMIN_USER

    if credentials and check_admin_credentials(
        credentials.username, credentials.password
    ):
        return credentials.username

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Admin privileges required",
        headers={"WWW-Authenticate": "Basic"},
    )


__all__ = ["check_admin_credentials", "require_admin", "security"]
