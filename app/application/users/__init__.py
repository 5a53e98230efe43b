"""
Application layer for the users bounded context.

Use cases validate input, enforce email uniqueness and translate
repository failures into domain errors. No framework or
infrastructure imports allowed.
"""
