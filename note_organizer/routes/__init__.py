# Routes package init
"""
Note Organizer: API Routes Package
==================================

Route Inventory:
    - notes.py:   GET/POST /notes, GET/PUT/DELETE /notes/{title}
    - health.py:  GET /health

Routes stay thin: read the request, call NoteService, return the result.
Errors are raised, never formatted here.
"""
