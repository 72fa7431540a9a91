"""
User repository for database access.

Encapsulates all Supabase queries for the ``users`` table. Bookmark
mutations go through the ``add_user_bookmark`` / ``remove_user_bookmark``
database functions (see migrations/002_users.sql) so that each one is a
single atomic statement.
"""

from datetime import datetime
from typing import Any, Optional

from postgrest.exceptions import APIError
from supabase import Client

from shared.repository import BaseRepository

from .exceptions import DuplicateIdentityError
from .models import User

UNIQUE_VIOLATION = "23505"


class UserRepository(BaseRepository[User]):
    """
    Repository for user records.

    Note: This repository does NOT perform input validation.
    The service layer is responsible for that.
    """

    table = "users"

    def __init__(self, db: Client) -> None:
        super().__init__(db)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_by_id(self, user_id: str) -> Optional[User]:
        result = self._db.table(self.table).select("*").eq("id", user_id).limit(1).execute()
        row = self._first(result)
        return self._map_to_user(row) if row else None

    def get_by_phone(self, phone: str) -> Optional[User]:
        result = self._db.table(self.table).select("*").eq("phone", phone).limit(1).execute()
        row = self._first(result)
        return self._map_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        result = (
            self._db.table(self.table)
            .select("*")
            .eq("email", email.strip().lower())
            .limit(1)
            .execute()
        )
        row = self._first(result)
        return self._map_to_user(row) if row else None

    def find_by_identifier(self, identifier: str) -> Optional[User]:
        """Match on phone first, then email."""
        return self.get_by_phone(identifier) or self.get_by_email(identifier)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_user(self, phone: str, email: str, password_hash: str) -> User:
        """
        Insert a new user.

        A unique-constraint violation is reported as DuplicateIdentityError
        naming the conflicting column.
        """
        data = {
            "phone": phone,
            "email": email,
            "password_hash": password_hash,
        }
        try:
            result = self._db.table(self.table).insert(data).execute()
        except APIError as e:
            field = self._conflicting_field(e)
            if field is None:
                raise
            raise DuplicateIdentityError(field) from e

        return self._map_to_user(result.data[0])

    def update_password(self, user_id: str, password_hash: str) -> None:
        self._db.table(self.table).update({"password_hash": password_hash}).eq("id", user_id).execute()

    def set_otp(self, user_id: str, code: str, expires_at: datetime) -> None:
        self._db.table(self.table).update(
            {"otp_code": code, "otp_expires_at": expires_at.isoformat()}
        ).eq("id", user_id).execute()

    def clear_otp(self, user_id: str, code: Optional[str] = None) -> bool:
        """
        Clear the pending code and its expiry together.

        With ``code``, the update only matches while that code is still
        pending, so two concurrent consumers cannot both succeed.
        """
        query = (
            self._db.table(self.table)
            .update({"otp_code": None, "otp_expires_at": None})
            .eq("id", user_id)
        )
        if code is not None:
            query = query.eq("otp_code", code)
        result = query.execute()
        return bool(result.data)

    def reset_password(self, user_id: str, code: str, password_hash: str) -> bool:
        """Set the new hash and consume ``code``, or change nothing."""
        result = (
            self._db.table(self.table)
            .update({"password_hash": password_hash, "otp_code": None, "otp_expires_at": None})
            .eq("id", user_id)
            .eq("otp_code", code)
            .execute()
        )
        return bool(result.data)

    def add_bookmark(self, user_id: str, course_id: str) -> None:
        self._db.rpc(
            "add_user_bookmark",
            {"p_user_id": user_id, "p_course_id": course_id},
        ).execute()

    def remove_bookmark(self, user_id: str, course_id: str) -> None:
        self._db.rpc(
            "remove_user_bookmark",
            {"p_user_id": user_id, "p_course_id": course_id},
        ).execute()

    def get_bookmark_ids(self, user_id: str) -> list[str]:
        result = self._db.table(self.table).select("bookmarks").eq("id", user_id).limit(1).execute()
        row = self._first(result)
        if not row:
            return []
        return [str(course_id) for course_id in row.get("bookmarks") or []]

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _conflicting_field(error: APIError) -> Optional[str]:
        """Work out which identity column a unique violation refers to."""
        if error.code != UNIQUE_VIOLATION:
            return None
        text = f"{error.message or ''} {error.details or ''}"
        if "phone" in text:
            return "phone"
        if "email" in text:
            return "email"
        return None

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            phone=data["phone"],
            email=data["email"],
            password_hash=data["password_hash"],
            otp_code=data.get("otp_code"),
            otp_expires_at=data.get("otp_expires_at"),
            bookmarks=[str(b) for b in data.get("bookmarks") or []],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
