"""
Adapter: User aggregate persistence in MongoDB.

Implements the UserRepository port.
Each user aggregate is one document; wallet and watchlist changes are
atomic single-document ``$push``/``$pull`` updates, so concurrent writers
for the same user interleave at operation granularity.
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.domain.accounts.entities import (
    Profile,
    Transaction,
    User,
    UserAggregate,
    Wallet,
    Watchlist,
    WatchlistItem,
)
from app.domain.accounts.errors import AccountsDomainError, PersistenceError
from app.domain.accounts.ports import UserRepository
from app.infrastructure.accounts.documents import (
    aggregate_from_document,
    item_to_document,
    profile_from_document,
    profile_to_document,
    transaction_to_document,
    user_to_document,
    wallet_from_document,
    watchlist_from_document,
)

logger = logging.getLogger(__name__)


@contextmanager
def _persistence_errors(operation: str) -> Iterator[None]:
    """Re-raise driver and mapping failures as PersistenceError."""
    try:
        yield
    except (PyMongoError, KeyError, ValueError, TypeError, AccountsDomainError) as exc:
        logger.error("MongoDB operation failed: %s (%s)", operation, type(exc).__name__)
        raise PersistenceError(operation, exc) from exc


class MongoUserRepository(UserRepository):
    """MongoDB implementation of the user repository.

    Args:
        collection: The pymongo collection holding user documents.
    """

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def ensure_indexes(self) -> None:
        """Create the unique indexes the aggregate relies on."""
        with _persistence_errors("create indexes"):
            self._collection.create_index(
                [("userId", ASCENDING)], unique=True, name="userId_unique"
            )
            self._collection.create_index(
                [("wallet.id", ASCENDING)],
                unique=True,
                sparse=True,
                name="walletId_unique",
            )
            self._collection.create_index(
                [("watchlist.id", ASCENDING)],
                unique=True,
                sparse=True,
                name="watchlistId_unique",
            )

    def _update(self, operation: str, user_id: str, update: dict) -> None:
        update.setdefault("$set", {})["updatedAt"] = self._now()
        with _persistence_errors(operation):
            result = self._collection.update_one({"userId": user_id}, update)
        if result.matched_count == 0:
            logger.info("%s matched no document for user=%s", operation, user_id)

    def _find(self, operation: str, user_id: str, field: str) -> Optional[dict]:
        with _persistence_errors(operation):
            return self._collection.find_one(
                {"userId": user_id}, {"_id": 0, field: 1}
            )

    # ------------------------------------------------------------------
    # Aggregate
    # ------------------------------------------------------------------

    def save_user(self, user: User, wallet: Wallet, watchlist: Watchlist) -> None:
        """Upsert the whole aggregate keyed by userId."""
        now = self._now()
        fields = user_to_document(user, wallet, watchlist)
        fields["updatedAt"] = now
        with _persistence_errors("save user"):
            self._collection.update_one(
                {"userId": user.user_id},
                {"$set": fields, "$setOnInsert": {"createdAt": now}},
                upsert=True,
            )

    def get_user(self, user_id: str) -> Optional[UserAggregate]:
        with _persistence_errors("get user"):
            doc = self._collection.find_one(
                {"userId": user_id},
                {"_id": 0, "createdAt": 0, "updatedAt": 0},
            )
            if doc is None:
                return None
            return aggregate_from_document(doc)

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    def update_profile(self, user_id: str, profile: Profile) -> None:
        self._update(
            "update profile",
            user_id,
            {"$set": {"profile": profile_to_document(profile)}},
        )

    def get_profile(self, user_id: str) -> Optional[Profile]:
        doc = self._find("get profile", user_id, "profile")
        if not doc or not doc.get("profile"):
            return None
        with _persistence_errors("get profile"):
            return profile_from_document(doc["profile"])

    # ------------------------------------------------------------------
    # Wallet
    # ------------------------------------------------------------------

    def get_wallet(self, user_id: str) -> Optional[Wallet]:
        doc = self._find("get wallet", user_id, "wallet")
        if not doc or not doc.get("wallet"):
            return None
        with _persistence_errors("get wallet"):
            return wallet_from_document(doc["wallet"])

    def add_transaction(self, user_id: str, transaction: Transaction) -> None:
        self._update(
            "add transaction",
            user_id,
            {"$push": {"wallet.transactions": transaction_to_document(transaction)}},
        )

    def remove_transaction(self, user_id: str, transaction_id: str) -> None:
        self._update(
            "remove transaction",
            user_id,
            {"$pull": {"wallet.transactions": {"transactionId": transaction_id}}},
        )

    # ------------------------------------------------------------------
    # Watchlist
    # ------------------------------------------------------------------

    def get_watchlist(self, user_id: str) -> Optional[Watchlist]:
        doc = self._find("get watchlist", user_id, "watchlist")
        if not doc or not doc.get("watchlist"):
            return None
        with _persistence_errors("get watchlist"):
            return watchlist_from_document(doc["watchlist"])

    def add_to_watchlist(self, user_id: str, item: WatchlistItem) -> None:
        self._update(
            "add to watchlist",
            user_id,
            {"$push": {"watchlist.items": item_to_document(item)}},
        )

    def remove_from_watchlist(self, user_id: str, item_id: str) -> None:
        self._update(
            "remove from watchlist",
            user_id,
            {"$pull": {"watchlist.items": {"itemId": item_id}}},
        )
