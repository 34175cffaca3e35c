"""
Smoke tests for the ContactRepository against a temporary SQLite database.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from sqlalchemy.exc import OperationalError

# Garante que o pacote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from contacts_api.db.session import Database  # noqa: E402
from contacts_api.repositories.sql_repository import (  # noqa: E402
    ContactNotFoundError,
    ContactRepository,
)


@pytest.fixture()
def repo(tmp_path):
    """Temporary SQLite file; disposed at teardown so the file is not left locked on Windows."""
    db_file = tmp_path / "test.db"
    database = Database(f"sqlite:///{db_file}")
    database.create_all()

    yield ContactRepository(database)

    database.dispose()


def test_database_requires_url():
    with pytest.raises(RuntimeError):
        Database("")


def test_connect_fails_for_unreachable_database(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'missing' / 'test.db'}")
    with pytest.raises(OperationalError):
        database.connect()
    database.dispose()


def test_create_assigns_distinct_ids(repo):
    first = repo.create_contact("Alice", "123")
    second = repo.create_contact("Alice", "123")
    assert isinstance(first.id, int)
    assert first.id != second.id
    assert first.to_dict() == {"id": first.id, "name": "Alice", "number": "123"}


def test_get_returns_none_for_missing_or_unparsed_id(repo):
    assert repo.get_contact(999) is None
    assert repo.get_contact(None) is None


def test_update_replaces_both_fields(repo):
    created = repo.create_contact("Bob", "555")
    updated = repo.update_contact(created.id, None, "777")
    assert updated.id == created.id
    assert updated.name is None
    assert updated.number == "777"

    stored = repo.get_contact(created.id)
    assert stored.to_dict() == {"id": created.id, "name": None, "number": "777"}


def test_update_missing_row_raises(repo):
    with pytest.raises(ContactNotFoundError) as info:
        repo.update_contact(42, "x", "y")
    assert info.value.contact_id == 42
    with pytest.raises(ContactNotFoundError):
        repo.update_contact(None, "x", "y")


def test_delete_removes_row_and_second_delete_raises(repo):
    created = repo.create_contact("Carol", "9")
    removed = repo.delete_contact(created.id)
    assert removed.id == created.id
    assert removed.name == "Carol"
    assert repo.get_contact(created.id) is None
    with pytest.raises(ContactNotFoundError):
        repo.delete_contact(created.id)
