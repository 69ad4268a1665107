"""
Tests for the accounts domain layer.

Tests entities, the aggregate factory, and error classes in isolation.
No external dependencies or IO required.
"""

from datetime import datetime, timezone

import pytest

from app.domain.accounts.entities import (
    Profile,
    Transaction,
    TransactionType,
    User,
    Wallet,
    Watchlist,
    WatchlistItem,
    parse_transaction_type,
)
from app.domain.accounts.errors import NotFoundError, PersistenceError, ValidationError
from app.domain.accounts.factory import create_user_aggregate

DONE_AT = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)


def _transaction(**overrides) -> Transaction:
    fields = dict(
        crypto_id="bitcoin",
        quantity=0.5,
        type=TransactionType.BUY,
        done_at=DONE_AT,
        price_at_purchase=62000.0,
    )
    fields.update(overrides)
    return Transaction(**fields)


class TestTransactionEntity:
    """Tests for the Transaction entity."""

    def test_defaults_currency_and_generates_id(self) -> None:
        tx = _transaction()
        assert tx.currency == "USD"
        assert tx.transaction_id

    def test_ids_are_unique(self) -> None:
        assert _transaction().transaction_id != _transaction().transaction_id

    def test_currency_is_upper_cased(self) -> None:
        assert _transaction(currency=" eur ").currency == "EUR"

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"crypto_id": ""}, "cryptoId"),
            ({"crypto_id": "   "}, "cryptoId"),
            ({"quantity": 0}, "quantity"),
            ({"quantity": -1.5}, "quantity"),
            ({"quantity": True}, "quantity"),
            ({"quantity": float("nan")}, "quantity"),
            ({"price_at_purchase": float("inf")}, "priceAtPurchase"),
            ({"type": "BUY"}, "type"),
            ({"done_at": "2024-01-01"}, "doneAt"),
            ({"price_at_purchase": 0}, "priceAtPurchase"),
            ({"currency": ""}, "currency"),
        ],
    )
    def test_invariants_name_the_field(self, overrides: dict, field: str) -> None:
        with pytest.raises(ValidationError) as excinfo:
            _transaction(**overrides)
        assert excinfo.value.field == field

    def test_to_dict_uses_wire_names(self) -> None:
        tx = _transaction(transaction_id="tx-1", currency="usd")
        assert tx.to_dict() == {
            "transactionId": "tx-1",
            "cryptoId": "bitcoin",
            "quantity": 0.5,
            "type": "BUY",
            "doneAt": "2024-03-01T12:30:00.000Z",
            "priceAtPurchase": 62000.0,
            "currency": "USD",
        }

    def test_is_immutable(self) -> None:
        tx = _transaction()
        with pytest.raises(AttributeError):
            tx.quantity = 2  # type: ignore[misc]


class TestParseTransactionType:
    @pytest.mark.parametrize("raw", ["BUY", "buy", " Buy "])
    def test_accepts_any_case(self, raw: str) -> None:
        assert parse_transaction_type(raw) is TransactionType.BUY

    def test_sell(self) -> None:
        assert parse_transaction_type("sell") is TransactionType.SELL

    @pytest.mark.parametrize("raw", ["HOLD", "", None, 1])
    def test_rejects_unknown(self, raw) -> None:
        with pytest.raises(ValidationError) as excinfo:
            parse_transaction_type(raw)
        assert excinfo.value.field == "type"


class TestWalletAndWatchlist:
    def test_wallet_keeps_insertion_order(self) -> None:
        wallet = Wallet(id="w1")
        first, second = _transaction(), _transaction(quantity=2)
        wallet.add_transaction(first)
        wallet.add_transaction(second)
        assert wallet.transactions == [first, second]

    def test_wallet_remove_unknown_is_noop(self) -> None:
        wallet = Wallet(id="w1")
        tx = _transaction()
        wallet.add_transaction(tx)
        wallet.remove_transaction("missing")
        assert wallet.transactions == [tx]
        wallet.remove_transaction(tx.transaction_id)
        assert wallet.transactions == []

    def test_watchlist_add_and_remove(self) -> None:
        watchlist = Watchlist(id="l1")
        item = WatchlistItem(crypto_id="ethereum")
        watchlist.add_item(item)
        assert watchlist.to_dict()["items"][0]["cryptoId"] == "ethereum"
        watchlist.remove_item(item.item_id)
        watchlist.remove_item(item.item_id)
        assert watchlist.items == []

    def test_watchlist_item_defaults_added_at_to_now(self) -> None:
        before = datetime.now(timezone.utc)
        item = WatchlistItem(crypto_id="solana")
        assert item.added_at >= before
        assert item.item_id


class TestUserAndProfile:
    def test_user_without_profile_omits_it(self) -> None:
        user = User(user_id="u1", email="a@b.com", wallet_id="w", watchlist_id="l")
        assert "profile" not in user.to_dict()

    def test_profile_serializes_date_of_birth(self) -> None:
        profile = Profile("Ada", "Lovelace", datetime(1815, 12, 10))
        assert profile.to_dict() == {
            "name": "Ada",
            "surname": "Lovelace",
            "dateOfBirth": "1815-12-10T00:00:00.000Z",
        }

    def test_profile_requires_name(self) -> None:
        with pytest.raises(ValidationError):
            Profile("", "Lovelace", datetime(1815, 12, 10))


class TestUserAggregateFactory:
    def test_links_fresh_wallet_and_watchlist(self) -> None:
        aggregate = create_user_aggregate("u1", "a@b.com")
        assert aggregate.user.wallet_id == aggregate.wallet.id
        assert aggregate.user.watchlist_id == aggregate.watchlist.id
        assert aggregate.wallet.id != aggregate.watchlist.id
        assert aggregate.wallet.transactions == []
        assert aggregate.watchlist.items == []
        assert aggregate.user.profile is None

    def test_each_call_generates_new_ids(self) -> None:
        first = create_user_aggregate("u1", "a@b.com")
        second = create_user_aggregate("u1", "a@b.com")
        assert first.wallet.id != second.wallet.id
        assert first.watchlist.id != second.watchlist.id


class TestDomainErrors:
    def test_not_found_message(self) -> None:
        assert NotFoundError("profile", "u1").message == "Profile not found."

    def test_persistence_error_keeps_cause(self) -> None:
        cause = RuntimeError("connection refused")
        err = PersistenceError("add transaction", cause)
        assert err.cause is cause
        assert "add transaction" in err.message
