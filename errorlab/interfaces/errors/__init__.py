"""
Simulated error endpoints.
"""
