"""
Noteful Backend — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID: Correlation ID stored in a ContextVar and echoed in
      the X-Request-ID response header
    - Logging: Method, path, status and duration with the request ID
"""
