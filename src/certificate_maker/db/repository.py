from __future__ import annotations

import asyncio
import logging
import re
from typing import Any, Awaitable, Optional, TypeVar

from bson import ObjectId
from pydantic import ValidationError
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from certificate_maker.certificates.models import Certificate
from certificate_maker.exceptions import CertificateNotFoundError, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Fields replaced on update; createdAt is deliberately absent
UPDATABLE_FIELDS = ("name", "bgImage", "elements", "updatedAt")


def name_filter(name: Optional[str]) -> dict[str, Any]:
    """Match-all, or a case-insensitive literal substring match on ``name``."""
    if not name:
        return {}
    return {"name": {"$regex": re.escape(name), "$options": "i"}}


class CertificateRepository:
    """Certificate CRUD over a single Motor collection.

    Every call is bounded by ``timeout_seconds``; driver errors and timeouts
    surface as :class:`StoreError`.
    """

    def __init__(self, collection: Any, *, timeout_seconds: float = 5.0):
        self.collection = collection
        self.timeout_seconds = timeout_seconds

    async def _bounded(self, op: str, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise StoreError(f"{op} timed out after {self.timeout_seconds}s") from exc
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc

    async def ensure_indexes(self) -> str:
        return await self._bounded("create_index", self.collection.create_index([("name", ASCENDING)]))

    async def count(self) -> int:
        return await self._bounded("count_documents", self.collection.count_documents({}))

    async def list(self, *, name: Optional[str] = None) -> list[Certificate]:
        async def _find() -> list[dict[str, Any]]:
            cursor = self.collection.find(name_filter(name)).sort("updatedAt", DESCENDING)
            return await cursor.to_list(length=None)

        docs = await self._bounded("find", _find())
        try:
            return [Certificate.from_document(doc) for doc in docs]
        except ValidationError as exc:
            raise StoreError(f"Error reading certificates: {exc}") from exc

    async def get(self, certificate_id: ObjectId) -> Certificate:
        doc = await self._bounded("find_one", self.collection.find_one({"_id": certificate_id}))
        if doc is None:
            raise CertificateNotFoundError(str(certificate_id))
        try:
            return Certificate.from_document(doc)
        except ValidationError as exc:
            raise StoreError(f"Error reading certificate: {exc}") from exc

    async def insert(self, certificate: Certificate) -> Certificate:
        result = await self._bounded("insert_one", self.collection.insert_one(certificate.to_document()))
        return certificate.model_copy(update={"id": str(result.inserted_id)})

    async def update(self, certificate: Certificate) -> Certificate:
        """Replace the mutable fields of an existing certificate in place.

        Returns the stored document after the update, so ``created_at`` is the
        value the store holds rather than whatever the caller sent.
        """
        object_id = certificate.object_id
        if object_id is None:
            raise ValueError("update() needs a certificate with an id")
        doc = certificate.to_document()
        changes = {field: doc[field] for field in UPDATABLE_FIELDS if field in doc}
        updated = await self._bounded(
            "find_one_and_update",
            self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            ),
        )
        if updated is None:
            raise CertificateNotFoundError(str(object_id))
        try:
            return Certificate.from_document(updated)
        except ValidationError as exc:
            raise StoreError(f"Error reading certificate: {exc}") from exc
