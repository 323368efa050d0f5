"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI

from ..core import API_PREFIX
from .routers import ALL_ROUTERS


def register_routes(app: FastAPI, prefix: str = API_PREFIX) -> None:
    """Attach all application routers to the given app under ``prefix``."""

    for router in ALL_ROUTERS:
        app.include_router(router, prefix=prefix)


__all__ = ["register_routes"]
