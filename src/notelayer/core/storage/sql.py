"""SQLAlchemy-backed note storage."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine

from ...database import create_session_factory, create_tables
from ..logging import get_logger
from ..models.note import NoteRecord
from ..schemas.notes import Note
from .interfaces import IStorage

logger = get_logger("storage.sql")


class SqlStorage(IStorage):
    """Stores notes in the ``notes`` table, one session per operation."""

    name = "sql"

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = create_session_factory(engine)

    async def init(self) -> None:
        await create_tables(self.engine)
        logger.info("Database tables created/verified")

    async def close(self) -> None:
        await self.engine.dispose()

    async def read_all(self) -> List[Note]:
        async with self.session_factory() as session:
            stmt = select(NoteRecord).order_by(NoteRecord.id)
            result = await session.execute(stmt)
            return [record.to_entity() for record in result.scalars().all()]

    async def read(self, note_id: int) -> Optional[Note]:
        async with self.session_factory() as session:
            record = await session.get(NoteRecord, note_id)
            return record.to_entity() if record else None

    async def create(self, name: str, content: str) -> Note:
        async with self.session_factory() as session:
            record = NoteRecord(name=name, content=content)
            session.add(record)
            await session.commit()
            await session.refresh(record)
            logger.debug(f"Created note {record.id}")
            return record.to_entity()

    async def update(self, note_id: int, name: str, content: str) -> Optional[Note]:
        async with self.session_factory() as session:
            record = await session.get(NoteRecord, note_id)
            if record is None:
                logger.debug(f"Update skipped, note {note_id} not found")
                return None

            if name:
                record.name = name
            if content:
                record.content = content

            await session.commit()
            await session.refresh(record)
            return record.to_entity()

    async def delete(self, note_id: int) -> Optional[Note]:
        async with self.session_factory() as session:
            record = await session.get(NoteRecord, note_id)
            if record is None:
                logger.debug(f"Delete skipped, note {note_id} not found")
                return None

            note = record.to_entity()
            await session.delete(record)
            await session.commit()
            logger.debug(f"Deleted note {note_id}")
            return note

    async def count(self) -> int:
        async with self.session_factory() as session:
            result = await session.execute(select(func.count(NoteRecord.id)))
            return result.scalar() or 0
