"""
Infrastructure adapters for the accounts bounded context.

MongoDB persistence for user aggregates and JWT token verification.
"""
