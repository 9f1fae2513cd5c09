"""
Items API — Middleware Package
===============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    The request id is set before the logging middleware reads it, so every
    access log line carries the id that is echoed in X-Request-ID.
"""
