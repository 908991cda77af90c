# Middleware package init
"""
Geologis Backend — Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → [Bearer Auth] → Route Handler

    - Request ID first so every log line carries the correlation ID
    - CORS before auth so preflight requests are answered without a token
    - Bearer auth guards /v1 only; /health and /docs stay open
"""
