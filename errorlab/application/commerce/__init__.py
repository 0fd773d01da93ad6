"""
Application layer for the synthetic commerce context.

Use cases generate demo payloads and report analytics events
through the telemetry port.
"""
