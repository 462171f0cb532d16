"""Tests for modules/auth/repository.py."""

from unittest.mock import MagicMock

import pytest

from modules.auth.repository import IDENTITY_COLUMNS, UserRepository
from shared.models import AuthenticatedUser

ROW = {
    "id": 1,
    "email": "a@x.com",
    "password_hash": "$2b$10$hash",
    "name": "Ana",
    "created_at": "2026-01-01T12:00:00+00:00",
}


@pytest.fixture
def mock_db():
    return MagicMock()


class TestUserRepository:
    def test_get_by_email_lower_cases(self, mock_db):
        query = mock_db.table.return_value.select.return_value
        query.eq.return_value.limit.return_value.execute.return_value.data = [ROW]

        user = UserRepository(mock_db).get_by_email("A@X.com")

        mock_db.table.assert_called_once_with("users")
        query.eq.assert_called_once_with("email", "a@x.com")
        assert user.id == 1
        assert user.password_hash == "$2b$10$hash"

    def test_get_by_email_missing(self, mock_db):
        query = mock_db.table.return_value.select.return_value
        query.eq.return_value.limit.return_value.execute.return_value.data = []

        assert UserRepository(mock_db).get_by_email("a@x.com") is None

    def test_get_identity_never_selects_hash(self, mock_db):
        select = mock_db.table.return_value.select
        select.return_value.eq.return_value.limit.return_value.execute.return_value.data = [
            {"id": 1, "email": "a@x.com", "name": None}
        ]

        identity = UserRepository(mock_db).get_identity(1)

        select.assert_called_once_with(IDENTITY_COLUMNS)
        assert "password" not in IDENTITY_COLUMNS
        assert identity == AuthenticatedUser(id=1, email="a@x.com", name=None)

    def test_get_identity_missing(self, mock_db):
        select = mock_db.table.return_value.select
        select.return_value.eq.return_value.limit.return_value.execute.return_value.data = []

        assert UserRepository(mock_db).get_identity(5) is None

    def test_create(self, mock_db):
        insert = mock_db.table.return_value.insert
        insert.return_value.execute.return_value.data = [ROW]

        user = UserRepository(mock_db).create("A@x.com", "$2b$10$hash", "Ana")

        insert.assert_called_once_with(
            {"email": "a@x.com", "password_hash": "$2b$10$hash", "name": "Ana"}
        )
        assert user.id == 1
        assert user.created_at is not None
