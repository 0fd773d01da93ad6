"""
Telemetry adapters.

Each adapter implements the TelemetryPort and connects to an
external analytics backend.
"""
