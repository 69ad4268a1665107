"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas,
and request authentication. No business logic belongs here.
Routes call service ports and return responses.
"""
