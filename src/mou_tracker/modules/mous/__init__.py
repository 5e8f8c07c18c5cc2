"""
MOUs module - memoranda of understanding with partner institutions.
"""

from mou_tracker.modules.mous.models import MOU
from mou_tracker.modules.mous.router import router

__all__ = ["MOU", "router"]
