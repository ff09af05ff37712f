"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

import logging
import uuid
from typing import Any, Generic, TypeVar

from postgrest.exceptions import APIError
from starlette.concurrency import run_in_threadpool
from supabase import Client

from .exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - ``_execute`` to run a built query off the event loop

    Query builders do no I/O until ``execute()``, so subclasses build the
    query inline and hand it to ``_execute``:

        async def get_by_id(self, post_id: str) -> Optional[Post]:
            result = await self._execute(
                self._db.table("posts").select("*").eq("id", post_id)
            )
            if not result.data:
                return None
            return self._map_to_post(result.data[0])
    """

    table_name: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self):
        return self._db.table(self.table_name)

    async def _execute(self, query: Any) -> Any:
        """
        Execute a query builder in the threadpool.

        The Supabase client is synchronous; running it in a worker thread
        keeps concurrent requests progressing while one waits on the store.

        Raises:
            StorageError: If PostgREST rejects the query
        """
        try:
            return await run_in_threadpool(query.execute)
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise
            logger.error(f"Query on {self.table_name or 'unknown table'} failed: {e.message}")
            raise StorageError(
                "Storage operation failed",
                code="STORAGE_ERROR",
                details={"table": self.table_name, "db_code": e.code},
            ) from e

    @staticmethod
    def is_valid_id(value: str) -> bool:
        """Row IDs are UUIDs; anything else cannot match a row."""
        try:
            uuid.UUID(str(value))
        except ValueError:
            return False
        return True
