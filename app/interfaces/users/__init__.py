"""
Transport adapters for the users bounded context.
"""
