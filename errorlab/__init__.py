"""
ErrorLab: telemetry demo service.

Application package root. Exposes endpoints that produce successes,
delays and simulated errors across many taxonomies, and reports each
of them to PostHog so a dashboard has realistic data to show.

Bounded contexts:
    - catalog: Simulated error descriptors, validation, random dispatch.
    - commerce: Synthetic orders, users, products and purchases.

Layers:
    - domain: Entities, static tables, generators, ports (ABCs), errors.
    - application: Use cases, DTOs, event shaping.
    - infrastructure: The PostHog adapter implementing the telemetry port.
    - interfaces: FastAPI routers, Pydantic schemas, dependencies.
    - shared: Cross-cutting concerns (errors, middleware, security, logging).
"""
