from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest
from bson import ObjectId
from pymongo.errors import ConnectionFailure, OperationFailure

from certificate_maker.certificates.models import Certificate
from certificate_maker.certificates.service import (
    bootstrap_store,
    save_certificate,
    seed_default_certificate,
)
from certificate_maker.exceptions import InvalidCertificateError, StoreError
from tests.fakes import at


@pytest.fixture
def mock_repo():
    repo = Mock()
    repo.insert = AsyncMock(side_effect=lambda c: c.model_copy(update={"id": str(ObjectId())}))
    repo.update = AsyncMock(side_effect=lambda c: c)
    repo.count = AsyncMock(return_value=0)
    return repo


class TestSaveCertificate:
    @pytest.mark.asyncio
    async def test_create_stamps_both_timestamps_identically(self, mock_repo):
        saved = await save_certificate(mock_repo, Certificate(name="New"))

        assert saved.id is not None
        assert saved.created_at == saved.updated_at
        mock_repo.insert.assert_awaited_once()
        mock_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_only_stamps_updated_at(self, mock_repo):
        oid = str(ObjectId())
        incoming = Certificate(id=oid, name="Existing", created_at=at(0), updated_at=at(1))

        saved = await save_certificate(mock_repo, incoming)

        mock_repo.insert.assert_not_called()
        sent = mock_repo.update.await_args.args[0]
        assert sent.id == oid
        assert sent.updated_at > at(1)
        assert sent.created_at == at(0)
        assert saved is sent

    @pytest.mark.asyncio
    async def test_empty_name_rejected_before_store(self, mock_repo):
        with pytest.raises(InvalidCertificateError, match="name is required"):
            await save_certificate(mock_repo, Certificate(name=""))
        mock_repo.insert.assert_not_called()
        mock_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_error_propagates(self, mock_repo):
        mock_repo.insert = AsyncMock(side_effect=StoreError("write failed"))
        with pytest.raises(StoreError):
            await save_certificate(mock_repo, Certificate(name="x"))


class TestSeedDefaultCertificate:
    @pytest.mark.asyncio
    async def test_seeds_when_empty(self, mock_repo):
        seeded = await seed_default_certificate(mock_repo)
        assert seeded is not None
        assert seeded.name == "Default Certificate"
        mock_repo.insert.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_skips_when_populated(self, mock_repo):
        mock_repo.count = AsyncMock(return_value=3)
        assert await seed_default_certificate(mock_repo) is None
        mock_repo.insert.assert_not_called()


class TestBootstrapStore:
    @pytest.mark.asyncio
    async def test_pings_indexes_and_seeds_once(self, store, collection):
        first = await bootstrap_store(store)
        second = await bootstrap_store(store)

        assert first is not None and second is None
        assert len(collection.docs) == 1
        assert collection.indexes == [[("name", 1)], [("name", 1)]]

    @pytest.mark.asyncio
    async def test_ping_failure_is_fatal(self, store, fake_database, collection):
        fake_database.ping_error = ConnectionFailure("refused")
        with pytest.raises(StoreError, match="refused"):
            await bootstrap_store(store)
        assert collection.calls == []

    @pytest.mark.asyncio
    async def test_index_failure_is_fatal(self, store, collection):
        collection.create_index = AsyncMock(side_effect=OperationFailure("not authorized"))
        with pytest.raises(StoreError, match="not authorized"):
            await bootstrap_store(store)
        assert collection.docs == []
