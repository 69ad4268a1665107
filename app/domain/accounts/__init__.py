"""
Accounts bounded context: domain layer.

This module contains all domain logic for user accounts:
- Users and their profiles
- Wallets (crypto transaction ledgers)
- Watchlists (tracked crypto assets)
"""
