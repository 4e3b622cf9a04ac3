# Services package init
"""
Note Organizer: Services Layer
==============================

Service Inventory:
    - NoteRepository: title-keyed operations on an in-memory collection
    - NoteService:    load → repository operation → save, per API request
    - formatter:      plain-text rendering of notes for the CLI
"""
