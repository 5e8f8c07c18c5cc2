"""
Shared module - base model and cross-module helpers.
"""

from mou_tracker.modules.shared.models import BaseModel

__all__ = ["BaseModel"]
