# Middleware package init
"""
Bookmarks Backend: Middleware Package
=====================================

Middleware Chain:
    Request → [CORS] → [Rate Limit] → [Request ID] → [Logging] → Route Handler

    CORS runs outermost so preflight OPTIONS requests are answered before
    anything else; responses travel back through the chain in reverse.
"""
