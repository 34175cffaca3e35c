"""SQLAlchemy models for the contacts store."""
from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from .session import Base


class Contact(Base):
    __tablename__ = "Contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=True)
    number = Column(Text, nullable=True)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "number": self.number}
