"""
Request-scoped middleware.
"""
