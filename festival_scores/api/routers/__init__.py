"""Aggregate API routers."""

from fastapi import APIRouter

from .auth import router as auth_router
from .scores import router as scores_router
from .system import router as system_router
from .teams import router as teams_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    auth_router,
    teams_router,
    scores_router,
)

__all__ = ["ALL_ROUTERS"]
