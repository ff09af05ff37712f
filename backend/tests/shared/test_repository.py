"""Tests for shared/repository.py."""

import pytest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from shared.exceptions import StorageError
from shared.repository import BaseRepository


class ThingRepository(BaseRepository[dict]):
    table_name = "things"

    async def all(self) -> list[dict]:
        result = await self._execute(self._table().select("*"))
        return result.data


class TestBaseRepository:
    def test_init_stores_db_client(self):
        mock_db = MagicMock()
        assert BaseRepository(mock_db)._db is mock_db

    @pytest.mark.asyncio
    async def test_execute_returns_result(self):
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.return_value.data = [{"id": "1"}]

        assert await ThingRepository(mock_db).all() == [{"id": "1"}]
        mock_db.table.assert_called_once_with("things")

    @pytest.mark.asyncio
    async def test_execute_wraps_api_errors(self):
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.side_effect = APIError(
            {"message": "relation does not exist", "code": "42P01"}
        )

        with pytest.raises(StorageError) as exc_info:
            await ThingRepository(mock_db).all()

        assert exc_info.value.details == {"table": "things", "db_code": "42P01"}

    @pytest.mark.asyncio
    async def test_execute_passes_unique_violation_through(self):
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.side_effect = APIError(
            {"message": "duplicate key", "code": "23505"}
        )

        with pytest.raises(APIError):
            await ThingRepository(mock_db).all()


class TestIsValidId:
    def test_uuid(self):
        assert BaseRepository.is_valid_id("5c4a2b1e-8d7f-4e6a-9b3c-2d1e0f9a8b7c")

    @pytest.mark.parametrize("value", ["", "123", "not-a-uuid", "5c4a2b1e"])
    def test_not_uuid(self, value):
        assert not BaseRepository.is_valid_id(value)
