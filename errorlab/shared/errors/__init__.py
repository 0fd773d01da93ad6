"""
Shared error handling package.

Centralizes error-to-HTTP mapping and the JSON envelope so that
every endpoint answers in the same shape.
"""
