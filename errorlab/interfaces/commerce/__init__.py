"""
Synthetic commerce endpoints.
"""
