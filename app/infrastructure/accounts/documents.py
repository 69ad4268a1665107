"""
Mapping between domain entities and the stored user document.

Stored shape (one document per user)::

    {
        "userId": str, "email": str,
        "profile": {"name", "surname", "dateOfBirth"},      # optional
        "wallet": {"id": str, "transactions": [...]},
        "watchlist": {"id": str, "items": [...]},
        "createdAt": datetime, "updatedAt": datetime,
    }

Timestamps are kept as BSON dates, not strings.
"""

from app.domain.accounts.entities import (
    DEFAULT_CURRENCY,
    Profile,
    Transaction,
    TransactionType,
    User,
    UserAggregate,
    Wallet,
    Watchlist,
    WatchlistItem,
    as_utc,
)


def profile_to_document(profile: Profile) -> dict:
    return {
        "name": profile.name,
        "surname": profile.surname,
        "dateOfBirth": profile.date_of_birth,
    }


def profile_from_document(doc: dict) -> Profile:
    return Profile(
        name=doc["name"],
        surname=doc["surname"],
        date_of_birth=as_utc(doc["dateOfBirth"]),
    )


def transaction_to_document(transaction: Transaction) -> dict:
    return {
        "transactionId": transaction.transaction_id,
        "cryptoId": transaction.crypto_id,
        "quantity": transaction.quantity,
        "type": transaction.type.value,
        "doneAt": transaction.done_at,
        "priceAtPurchase": transaction.price_at_purchase,
        "currency": transaction.currency,
    }


def transaction_from_document(doc: dict) -> Transaction:
    return Transaction(
        transaction_id=doc["transactionId"],
        crypto_id=doc["cryptoId"],
        quantity=doc["quantity"],
        type=TransactionType(doc["type"]),
        done_at=as_utc(doc["doneAt"]),
        price_at_purchase=doc["priceAtPurchase"],
        currency=doc.get("currency") or DEFAULT_CURRENCY,
    )


def item_to_document(item: WatchlistItem) -> dict:
    return {
        "itemId": item.item_id,
        "cryptoId": item.crypto_id,
        "addedAt": item.added_at,
    }


def item_from_document(doc: dict) -> WatchlistItem:
    return WatchlistItem(
        item_id=doc["itemId"],
        crypto_id=doc["cryptoId"],
        added_at=as_utc(doc["addedAt"]),
    )


def wallet_to_document(wallet: Wallet) -> dict:
    return {
        "id": wallet.id,
        "transactions": [transaction_to_document(t) for t in wallet.transactions],
    }


def wallet_from_document(doc: dict) -> Wallet:
    return Wallet(
        id=doc["id"],
        transactions=[
            transaction_from_document(t) for t in doc.get("transactions", [])
        ],
    )


def watchlist_to_document(watchlist: Watchlist) -> dict:
    return {
        "id": watchlist.id,
        "items": [item_to_document(i) for i in watchlist.items],
    }


def watchlist_from_document(doc: dict) -> Watchlist:
    return Watchlist(
        id=doc["id"],
        items=[item_from_document(i) for i in doc.get("items", [])],
    )


def user_to_document(user: User, wallet: Wallet, watchlist: Watchlist) -> dict:
    """Build the fields written by an aggregate save (``$set`` payload)."""
    doc = {
        "userId": user.user_id,
        "email": user.email,
        "wallet": wallet_to_document(wallet),
        "watchlist": watchlist_to_document(watchlist),
    }
    if user.profile is not None:
        doc["profile"] = profile_to_document(user.profile)
    return doc


def aggregate_from_document(doc: dict) -> UserAggregate:
    wallet = wallet_from_document(doc["wallet"])
    watchlist = watchlist_from_document(doc["watchlist"])
    user = User(
        user_id=doc["userId"],
        email=doc["email"],
        wallet_id=wallet.id,
        watchlist_id=watchlist.id,
    )
    if doc.get("profile"):
        user.set_profile(profile_from_document(doc["profile"]))
    return UserAggregate(user=user, wallet=wallet, watchlist=watchlist)
