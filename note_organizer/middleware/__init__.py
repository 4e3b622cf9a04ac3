"""
Note Organizer: Middleware Package
==================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → Route Handler

    Request ID runs first so every log line of the request, the access
    line included, carries the ID through RequestIDLogFilter.
"""
