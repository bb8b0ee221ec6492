# Middleware package init
"""
Hotel API - Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Correlation ID] → [Access Log] → [Body Size Limit] → Route Handler

    1. Correlation ID first: every later log line carries the request's id
    2. Access log: records status and duration, including 413 rejections
    3. Body size limit: rejects oversized bodies (declared or counted while read)

    Responses travel back in reverse, picking up X-Correlation-ID last.
"""
