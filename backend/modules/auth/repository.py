"""
User repository for database access.

Encapsulates the Supabase queries for the ``users`` table. Emails are
stored and queried lower-cased.
"""

from typing import Optional, Any

from shared.models import AuthenticatedUser
from shared.repository import BaseRepository

from .models import UserRecord

USERS_TABLE = "users"

# Columns the auth gate may read. The password hash is never among them.
IDENTITY_COLUMNS = "id, email, name"


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user records.

    Note: uniqueness of ``email`` is enforced by the table's unique index;
    a violation surfaces as the client's own error.
    """

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        result = (
            self._db.table(USERS_TABLE)
            .select("*")
            .eq("email", email.lower())
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_identity(self, user_id: int) -> Optional[AuthenticatedUser]:
        result = (
            self._db.table(USERS_TABLE)
            .select(IDENTITY_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        row = result.data[0]
        return AuthenticatedUser(id=row["id"], email=row["email"], name=row.get("name"))

    def create(self, email: str, password_hash: str, name: Optional[str]) -> UserRecord:
        data = {
            "email": email.lower(),
            "password_hash": password_hash,
            "name": name,
        }
        result = self._db.table(USERS_TABLE).insert(data).execute()
        return self._map_to_user(result.data[0])

    def _map_to_user(self, row: dict[str, Any]) -> UserRecord:
        return UserRecord(
            id=row["id"],
            email=row["email"],
            password_hash=row["password_hash"],
            name=row.get("name"),
            created_at=row.get("created_at"),
        )
