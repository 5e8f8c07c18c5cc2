"""
Courses module - training courses grouped by field of study.
"""

from mou_tracker.modules.courses.models import CompletionStatus, Course
from mou_tracker.modules.courses.router import router

__all__ = ["CompletionStatus", "Course", "router"]
