"""
Application layer package.

Contains the services that orchestrate domain logic and the inbound
ports they implement. This layer depends on domain ports, never on
infrastructure.
"""
