"""
Application layer for the error catalog bounded context.

Use cases resolve simulated errors and report them through the
telemetry port. No framework or infrastructure imports allowed.
"""
