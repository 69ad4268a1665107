"""
Accounts bounded context: HTTP interface.

Routers for users, wallet and watchlist, the auth cookie dependency,
and the dependency wiring for the accounts context.
"""
