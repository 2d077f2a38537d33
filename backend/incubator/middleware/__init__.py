"""
Incubator Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Rate Limit] → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Rate Limit FIRST: reject abusive clients before any processing
    2. Request ID: correlation ID for logs and the X-Request-ID header
    3. Logging: one access line per request, tagged with the request ID
"""
