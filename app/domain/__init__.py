"""
Domain layer package.

Contains pure business logic: entities, validation rules, errors
and port interfaces. No framework imports, no IO, no side effects.
"""
