from __future__ import annotations

import logging

from certificate_maker.exceptions import StoreError

from .store import MongoStore

logger = logging.getLogger(__name__)


async def mongo_healthcheck(store: MongoStore) -> bool:
    try:
        await store.ping()
        return True
    except StoreError as exc:
        logger.warning("Mongo health check failed: %s", exc)
        return False
