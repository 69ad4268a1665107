"""
Application layer for the accounts bounded context.

The service coordinates domain entities and the repository port to
fulfill account operations. No framework or infrastructure imports allowed.
"""
