"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: the MongoDB document store and
JWT token verification.
"""
