from __future__ import annotations

import logging
from collections import defaultdict
from typing import Optional

from fastapi import FastAPI
from fastapi.routing import APIRoute

from certificate_maker.app.core.env import get_env
from certificate_maker.app.settings import AppSettings, get_app_settings
from certificate_maker.db.integration import attach_store
from certificate_maker.db.settings import MongoSettings, get_mongo_settings
from certificate_maker.db.store import MongoStore

from .middleware import CatchAllExceptionMiddleware, CORSGateMiddleware, register_error_handlers
from .routers import register_all_routers

logger = logging.getLogger(__name__)


def _gen_operation_id_factory():
    used: dict[str, int] = defaultdict(int)

    def _gen(route: APIRoute) -> str:
        base = route.name or getattr(route.endpoint, "__name__", "op")
        candidate = base
        if used[candidate]:
            method = next(iter(route.methods or ["GET"])).lower()
            candidate = f"{base}_{method}"
            if used[candidate]:
                candidate = f"{candidate}_{used[candidate] + 1}"
        used[candidate] += 1
        return candidate

    return _gen


def create_app(
    *,
    store: Optional[MongoStore] = None,
    app_settings: Optional[AppSettings] = None,
    mongo_settings: Optional[MongoSettings] = None,
) -> FastAPI:
    """
    Build the HTTP application around an explicitly provided store handle.

    When ``store`` is omitted one is created from ``mongo_settings`` (or the
    environment). The store is bootstrapped (ping, index, seed) in the app's
    lifespan and closed on shutdown.
    """
    app_settings = app_settings or get_app_settings()
    store = store or MongoStore(mongo_settings or get_mongo_settings())

    app = FastAPI(
        title=app_settings.name,
        version=app_settings.version,
        generate_unique_id_function=_gen_operation_id_factory(),
    )

    # Error handling (inner), CORS gate (outermost, so error responses carry headers too)
    app.add_middleware(CatchAllExceptionMiddleware)
    register_error_handlers(app)
    app.add_middleware(CORSGateMiddleware, allow_origin=app_settings.allowed_origin)

    register_all_routers(app)
    attach_store(app, store)

    logger.info(
        "%s version of %s initialized [env: %s]",
        app_settings.version,
        app_settings.name,
        get_env(),
    )
    return app


__all__ = ["create_app"]
