"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
Emails are stored lower-cased so lookups are case-insensitive.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository, is_uuid
from modules.billing.models import SubscriptionTier

from .models import User


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Note: This repository does NOT perform authorization checks.
    """

    TABLE = "users"

    def get_by_id(self, user_id: str) -> Optional[User]:
        if not is_uuid(user_id):
            return None
        return self._get_one("id", user_id)

    def get_by_clerk_id(self, clerk_id: str) -> Optional[User]:
        return self._get_one("clerk_id", clerk_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._get_one("email", email.lower())

    def get_by_stripe_customer_id(self, customer_id: str) -> Optional[User]:
        return self._get_one("stripe_customer_id", customer_id)

    def create(self, data: dict[str, Any]) -> User:
        """
        Insert a user record.

        Args:
            data: Column values (clerk_id, email, names, tier).

        Returns:
            Created User with generated ID and timestamps.
        """
        row = dict(data)
        row["email"] = row["email"].lower()
        row.setdefault("companies", [])
        result = self._db.table(self.TABLE).insert(row).execute()
        return self._map_to_user(result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[User]:
        """
        Update columns on a user record.

        Returns:
            The updated User, or None if no row matched.
        """
        row = dict(data)
        if "email" in row:
            row["email"] = row["email"].lower()
        row["updated_at"] = datetime.now(timezone.utc).isoformat()
        result = self._db.table(self.TABLE).update(row).eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def set_subscription(
        self,
        user_id: str,
        tier: SubscriptionTier,
        stripe_customer_id: Optional[str] = None,
    ) -> Optional[User]:
        """Write an absolute tier (and optionally the Stripe customer id)."""
        data: dict[str, Any] = {"subscription_tier": tier.value}
        if stripe_customer_id:
            data["stripe_customer_id"] = stripe_customer_id
        return self.update(user_id, data)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _get_one(self, column: str, value: str) -> Optional[User]:
        result = self._db.table(self.TABLE).select("*").eq(column, value).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            clerk_id=data["clerk_id"],
            email=data["email"],
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            subscription_tier=SubscriptionTier(data.get("subscription_tier") or "free"),
            stripe_customer_id=data.get("stripe_customer_id"),
            companies=[str(c) for c in data.get("companies") or []],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
