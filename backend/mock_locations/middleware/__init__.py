# Middleware package init
"""
Mock Location API — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [HTTPS redirect] → [Request ID] → [Logging] → [GZip] → [CORS] → Route

    1. HTTPS redirect (optional): bounce plain HTTP before doing any work
    2. Request ID: generate the correlation ID used by everything below
    3. Logging: log method, path, status and duration with that ID
"""
