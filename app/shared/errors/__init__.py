"""
Shared error handling package.

Centralizes domain-error-to-HTTP mapping so that every route
answers failures with the same status codes and body shape.
"""
