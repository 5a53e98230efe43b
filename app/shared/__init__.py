"""
Shared module package.

Cross-cutting concerns used by every transport:
- Error handling and mapping
- Security headers and rate limiting
- Logging configuration
"""
