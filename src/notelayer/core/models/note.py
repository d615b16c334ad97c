# Note table used by the sql storage backend
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..schemas.notes import Note
from .base import BaseModel


class NoteRecord(BaseModel):
    """Row form of a note."""

    __tablename__ = "notes"
    # AUTOINCREMENT keeps sqlite from handing out the id of a deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def to_entity(self) -> Note:
        return Note.model_validate(self)
