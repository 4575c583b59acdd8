from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from certificate_maker.certificates.service import bootstrap_store

from ..repository import CertificateRepository
from ..store import MongoStore

logger = logging.getLogger(__name__)


def attach_store(app: FastAPI, store: MongoStore) -> MongoStore:
    """Bind ``store`` to ``app`` and run its bootstrap/teardown in the lifespan."""
    app.state.store = store  # type: ignore[attr-defined]
    existing = getattr(app.router, "lifespan_context", None)  # type: ignore[attr-defined]

    @asynccontextmanager
    async def composed_lifespan(_app: FastAPI):
        _app.state.store = store  # type: ignore[attr-defined]
        try:
            logger.info(
                "Mongo attached: url=%s database=%s collection=%s",
                store.settings.sanitized_url,
                store.settings.database,
                store.settings.collection,
            )
            await bootstrap_store(store)
            if existing:
                async with existing(_app):  # type: ignore[misc]
                    yield
            else:
                yield
        finally:
            await store.close()

    app.router.lifespan_context = composed_lifespan  # type: ignore[attr-defined]
    return store


def get_store(request: Request) -> MongoStore:
    return request.app.state.store  # type: ignore[attr-defined]


def get_repository(request: Request) -> CertificateRepository:
    return get_store(request).certificates()


StoreDep = Annotated[MongoStore, Depends(get_store)]
RepositoryDep = Annotated[CertificateRepository, Depends(get_repository)]
