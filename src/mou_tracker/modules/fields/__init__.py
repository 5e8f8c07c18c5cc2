"""
Fields module - field-of-study aggregates and their course listings.
"""

from mou_tracker.modules.fields.models import Field
from mou_tracker.modules.fields.repository import FieldRepository

__all__ = ["Field", "FieldRepository"]
