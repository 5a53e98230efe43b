"""
Interfaces layer package.

Contains FastAPI routers (HTTP and JSON-RPC), Pydantic request/response
schemas and input parsing. No business logic belongs here.
Routes call use cases and return responses.
"""
