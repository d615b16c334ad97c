"""
NoteLayer - note CRUD service with REPL and HTTP front-ends

Use-cases sit behind a pluggable storage interface; parsers and presenters
adapt them to each front-end.
"""

__version__ = "1.0.0"
