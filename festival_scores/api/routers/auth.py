"""Admin session routes."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from ...core import check_admin_credentials

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/auth/login")
def auth_login(body: Dict[str, Any], request: Request):
    """Start an admin session from the configured credentials."""

    username = str(body.get("username") or body.get("email") or "").strip()
    password = str(body.get("password") or "")
    if not check_admin_credentials(username, password):
        logger.warning("Rejected admin login for %r", username)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    request.session["name"] = username
    request.session["role"] = "admin"
    return {"success": True, "user": {"name": username, "role": "admin"}}


@router.post("/auth/logout")
def auth_logout(request: Request):
    request.session.clear()
    return JSONResponse({"ok": True})


@router.get("/auth/me")
def me(request: Request):
    role = request.session.get("role")
    if not role:
        return JSONResponse({"user": None})
    return JSONResponse(
        {"user": {"name": request.session.get("name"), "role": role}}
    )


__all__ = ["router"]
