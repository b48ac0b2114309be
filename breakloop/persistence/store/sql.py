"""SQL implementation of the key-value store."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from breakloop.persistence.store.base import KeyValueStore, StorageError
from breakloop.persistence.tables import kv_records_table


class SqlKeyValueStore(KeyValueStore):
    """PostgreSQL-backed KeyValueStore.

    Each call runs in its own short transaction, so a completed ``put`` is
    durable before the next collection operation starts.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize store with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        super().__init__()
        self.session_factory = session_factory

    async def get(self, key: str) -> bytes | None:
        """Read the record under ``key``."""
        stmt = select(kv_records_table.c.value).where(kv_records_table.c.key == key)
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read {key}: {e}") from e

    async def put(self, key: str, value: bytes) -> None:
        """Upsert the record under ``key``."""
        now = datetime.now(timezone.utc)
        stmt = insert(kv_records_table).values(key=key, value=value, updated_at=now)
        stmt = stmt.on_conflict_do_update(
            index_elements=[kv_records_table.c.key],
            set_={"value": stmt.excluded.value, "updated_at": now},
        )
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    await session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to write {key}: {e}") from e
