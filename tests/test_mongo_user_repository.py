"""
Tests for the MongoDB repository adapter.

The pymongo collection is a MagicMock; tests assert on the update
documents sent to the driver and on error translation.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from app.domain.accounts.entities import Transaction, TransactionType, WatchlistItem
from app.domain.accounts.errors import PersistenceError
from app.domain.accounts.factory import create_user_aggregate
from app.infrastructure.accounts.mongo_user_repository import MongoUserRepository

DONE_AT = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def collection() -> MagicMock:
    return MagicMock()


@pytest.fixture
def repo(collection: MagicMock) -> MongoUserRepository:
    return MongoUserRepository(collection)


def _stored_document() -> dict:
    return {
        "userId": "u1",
        "email": "a@b.com",
        "profile": {
            "name": "Ada",
            "surname": "Lovelace",
            "dateOfBirth": datetime(1815, 12, 10, tzinfo=timezone.utc),
        },
        "wallet": {
            "id": "w1",
            "transactions": [
                {
                    "transactionId": "t1",
                    "cryptoId": "bitcoin",
                    "quantity": 1.5,
                    "type": "SELL",
                    "doneAt": DONE_AT,
                    "priceAtPurchase": 100.0,
                }
            ],
        },
        "watchlist": {"id": "l1", "items": []},
    }


class TestWrites:
    def test_save_user_upserts_whole_aggregate(self, repo, collection) -> None:
        aggregate = create_user_aggregate("u1", "a@b.com")

        repo.save_user(aggregate.user, aggregate.wallet, aggregate.watchlist)

        (query, update), kwargs = collection.update_one.call_args
        assert query == {"userId": "u1"}
        assert kwargs == {"upsert": True}
        assert update["$set"]["email"] == "a@b.com"
        assert update["$set"]["wallet"] == {"id": aggregate.wallet.id, "transactions": []}
        assert update["$set"]["watchlist"] == {"id": aggregate.watchlist.id, "items": []}
        assert "updatedAt" in update["$set"]
        assert "createdAt" in update["$setOnInsert"]

    def test_add_transaction_pushes(self, repo, collection) -> None:
        tx = Transaction(
            crypto_id="bitcoin",
            quantity=2,
            type=TransactionType.BUY,
            done_at=DONE_AT,
            price_at_purchase=50.0,
            transaction_id="t9",
        )

        repo.add_transaction("u1", tx)

        query, update = collection.update_one.call_args.args
        assert query == {"userId": "u1"}
        pushed = update["$push"]["wallet.transactions"]
        assert pushed["transactionId"] == "t9"
        assert pushed["type"] == "BUY"
        assert pushed["doneAt"] == DONE_AT
        assert pushed["currency"] == "USD"
        assert "updatedAt" in update["$set"]

    def test_remove_transaction_pulls_by_id(self, repo, collection) -> None:
        repo.remove_transaction("u1", "t1")

        _, update = collection.update_one.call_args.args
        assert update["$pull"] == {"wallet.transactions": {"transactionId": "t1"}}

    def test_watchlist_push_and_pull(self, repo, collection) -> None:
        item = WatchlistItem(crypto_id="ethereum", item_id="i1")

        repo.add_to_watchlist("u1", item)
        _, update = collection.update_one.call_args.args
        assert update["$push"]["watchlist.items"]["itemId"] == "i1"

        repo.remove_from_watchlist("u1", "i1")
        _, update = collection.update_one.call_args.args
        assert update["$pull"] == {"watchlist.items": {"itemId": "i1"}}

    def test_unmatched_update_is_logged(self, repo, collection, caplog) -> None:
        collection.update_one.return_value.matched_count = 0

        with caplog.at_level("INFO", logger="app.infrastructure.accounts.mongo_user_repository"):
            repo.remove_transaction("ghost", "t1")

        assert "remove transaction matched no document for user=ghost" in caplog.text

    def test_matched_update_is_quiet(self, repo, collection, caplog) -> None:
        collection.update_one.return_value.matched_count = 1

        with caplog.at_level("INFO", logger="app.infrastructure.accounts.mongo_user_repository"):
            repo.remove_transaction("u1", "t1")

        assert "matched no document" not in caplog.text

    def test_driver_failure_becomes_persistence_error(self, repo, collection) -> None:
        collection.update_one.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(PersistenceError) as excinfo:
            repo.remove_transaction("u1", "t1")

        assert excinfo.value.operation == "remove transaction"
        assert isinstance(excinfo.value.cause, ServerSelectionTimeoutError)


class TestReads:
    def test_get_user_rebuilds_aggregate(self, repo, collection) -> None:
        collection.find_one.return_value = _stored_document()

        aggregate = repo.get_user("u1")

        assert aggregate.user.profile.name == "Ada"
        assert aggregate.wallet.transactions[0].type is TransactionType.SELL
        assert aggregate.wallet.transactions[0].currency == "USD"
        _, projection = collection.find_one.call_args.args
        assert projection["_id"] == 0

    def test_get_wallet_projects_only_wallet(self, repo, collection) -> None:
        collection.find_one.return_value = {"wallet": _stored_document()["wallet"]}

        wallet = repo.get_wallet("u1")

        assert wallet.id == "w1"
        assert collection.find_one.call_args.args == (
            {"userId": "u1"},
            {"_id": 0, "wallet": 1},
        )

    @pytest.mark.parametrize("method", ["get_user", "get_profile", "get_wallet", "get_watchlist"])
    def test_missing_user_returns_none(self, repo, collection, method: str) -> None:
        collection.find_one.return_value = None
        assert getattr(repo, method)("ghost") is None

    def test_user_without_profile(self, repo, collection) -> None:
        collection.find_one.return_value = {}
        assert repo.get_profile("u1") is None

    def test_corrupt_document_becomes_persistence_error(self, repo, collection) -> None:
        collection.find_one.return_value = {"wallet": {"id": "w1", "transactions": [{}]}}

        with pytest.raises(PersistenceError):
            repo.get_wallet("u1")


class TestIndexes:
    def test_ensure_indexes(self, repo, collection) -> None:
        repo.ensure_indexes()

        names = [c.kwargs["name"] for c in collection.create_index.call_args_list]
        assert names == ["userId_unique", "walletId_unique", "watchlistId_unique"]
        assert all(c.kwargs["unique"] for c in collection.create_index.call_args_list)
