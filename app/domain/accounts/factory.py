"""
Construction of new user aggregates.

A user is always created together with an empty wallet and an empty
watchlist so that ``walletId`` and ``watchlistId`` never dangle.
"""

from app.domain.accounts.entities import (
    User,
    UserAggregate,
    Wallet,
    Watchlist,
    generate_id,
)


def create_user_aggregate(user_id: str, email: str) -> UserAggregate:
    """Build a new user with a freshly identified wallet and watchlist.

    Args:
        user_id: External identity of the user.
        email: Contact address of the user.

    Returns:
        The aggregate. Nothing is persisted.
    """
    wallet = Wallet(id=generate_id())
    watchlist = Watchlist(id=generate_id())
    user = User(
        user_id=user_id,
        email=email,
        wallet_id=wallet.id,
        watchlist_id=watchlist.id,
    )
    return UserAggregate(user=user, wallet=wallet, watchlist=watchlist)
