"""
Synthetic commerce context: domain layer.

Generates orders, users and products used as payloads for
analytics events.
"""
