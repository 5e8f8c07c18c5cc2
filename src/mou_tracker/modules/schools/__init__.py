"""
Schools module - partner school aggregates and their MOU listings.
"""

from mou_tracker.modules.schools.models import School
from mou_tracker.modules.schools.repository import SchoolRepository

__all__ = ["School", "SchoolRepository"]
