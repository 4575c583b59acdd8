from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from certificate_maker.exceptions import StoreError

from .repository import CertificateRepository
from .settings import MongoSettings

logger = logging.getLogger(__name__)


class MongoStore:
    """Holds the Motor client for the lifetime of the process.

    Built once at startup and handed to the app; Motor pools connections and is
    safe to share across concurrent requests.
    """

    def __init__(self, settings: MongoSettings, client: Optional[Any] = None):
        self.settings = settings
        self._client = client or AsyncIOMotorClient(
            settings.url,
            serverSelectionTimeoutMS=int(settings.connect_timeout_seconds * 1000),
            connectTimeoutMS=int(settings.connect_timeout_seconds * 1000),
            # server selection gets the connect bound; reads and writes the operation bound
            socketTimeoutMS=int(settings.operation_timeout_seconds * 1000),
            tz_aware=True,
        )
        self._closed = False

    @property
    def client(self) -> Any:
        return self._client

    @property
    def database(self) -> Any:
        return self._client[self.settings.database]

    @property
    def collection(self) -> Any:
        return self.database[self.settings.collection]

    def certificates(self) -> CertificateRepository:
        return CertificateRepository(
            self.collection, timeout_seconds=self.settings.operation_timeout_seconds
        )

    async def ping(self) -> None:
        try:
            await asyncio.wait_for(
                self.database.command("ping"),
                timeout=self.settings.connect_timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise StoreError(
                f"ping timed out after {self.settings.connect_timeout_seconds}s"
            ) from exc
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            await asyncio.wait_for(
                asyncio.to_thread(self._client.close),
                timeout=self.settings.disconnect_timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Mongo disconnect did not finish within %ss",
                self.settings.disconnect_timeout_seconds,
            )
        else:
            logger.info("Mongo client closed")
