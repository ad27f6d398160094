# Middleware package init
"""
Resource API - Middleware Package
==================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Timing/Logging] → [CORS] → Route Handler

    1. Request ID: fresh correlation ID, visible to every later log line
    2. Timing/Logging: X-Response-Time header and one access log line

    The order is reversed for responses:
    Response ← [Request ID] ← [Timing/Logging] ← [CORS] ← Route Handler
"""
