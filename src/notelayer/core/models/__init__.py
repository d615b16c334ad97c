"""
Database models for NoteLayer.

Only the sql storage backend uses these; the in-memory backend keeps
plain ``Note`` schemas in a dict.
"""

from .base import BaseModel
from .note import NoteRecord

__all__ = [
    "BaseModel",
    "NoteRecord",
]
