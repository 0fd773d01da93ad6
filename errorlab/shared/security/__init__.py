"""
Security middleware: secure headers and rate limiting.
"""
