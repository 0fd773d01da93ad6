"""
Error catalog bounded context: domain layer.

This module contains all domain logic for simulated errors:
- Static descriptor tables per error category
- Collect-all field validation
- Weighted random error selection
- Simulated runtime and async faults
"""
