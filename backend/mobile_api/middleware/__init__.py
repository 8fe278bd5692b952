"""
Mobile API Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (request order):
    Request → [Request ID] → [Logging] → [Rate Limit] → [GZip] → [CORS] → Route Handler

    The request ID is assigned first so access lines and every error body,
    429 included, carry it.
"""
