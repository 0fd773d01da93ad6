"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error handling and the JSON envelope
- Request context middleware
- Security middleware and rate limiting
- Logging configuration
"""
