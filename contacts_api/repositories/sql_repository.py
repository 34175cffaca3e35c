"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from contacts_api.db.models import Contact
from contacts_api.db.session import Database


class ContactNotFoundError(LookupError):
    """Raised when an update/delete targets an id with no matching row."""

    def __init__(self, contact_id: Optional[int]) -> None:
        super().__init__(f"Contact {contact_id} not found")
        self.contact_id = contact_id


class ContactRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def create_contact(self, name: str | None, number: str | None) -> Contact:
        entity = Contact(name=name, number=number)
        with self.database.session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def get_contact(self, contact_id: Optional[int]) -> Optional[Contact]:
        if contact_id is None:
            return None
        with self.database.session() as session:
            return session.get(Contact, contact_id)

    def update_contact(self, contact_id: Optional[int], name: str | None, number: str | None) -> Contact:
        with self.database.session() as session:
            contact = session.get(Contact, contact_id) if contact_id is not None else None
            if contact is None:
                raise ContactNotFoundError(contact_id)
            contact.name = name
            contact.number = number
            session.commit()
            session.refresh(contact)
            return contact

    def delete_contact(self, contact_id: Optional[int]) -> Contact:
        with self.database.session() as session:
            contact = session.get(Contact, contact_id) if contact_id is not None else None
            if contact is None:
                raise ContactNotFoundError(contact_id)
            session.delete(contact)
            session.commit()
            return contact
