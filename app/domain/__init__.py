"""
Domain layer package.

Contains pure business logic: entities, the aggregate factory,
and port interfaces. This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""
