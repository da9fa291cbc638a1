"""
ApplicationRecord model base tests.
"""
from typing import Optional
from sqlmodel import Field, SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from core.database.record import ApplicationRecord


class Note(ApplicationRecord, table=True):
    __tablename__ = "notes"
    title: str = Field(index=True)
    body: Optional[str] = None


def test_base_has_no_table():
    assert "notes" in SQLModel.metadata.tables
    assert "applicationrecord" not in SQLModel.metadata.tables


def test_timestamps_default_on_construction():
    note = Note(title="first")
    assert note.id is None
    assert note.created_at.tzinfo is not None
    assert note.updated_at >= note.created_at


def test_touch_moves_updated_at():
    note = Note(title="first")
    before = note.updated_at
    note.touch()
    assert note.updated_at >= before


async def test_subclass_persists(async_session: AsyncSession):
    async_session.add(Note(title="first", body="hello"))
    await async_session.commit()

    result = await async_session.exec(select(Note).where(Note.title == "first"))
    note = result.one()
    assert note.id is not None
    assert note.body == "hello"
    assert note.created_at is not None
