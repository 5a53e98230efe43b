"""
Users bounded context — domain layer.

- User entity and its validation rule
- Error taxonomy shared by every transport
- Repository port
"""
