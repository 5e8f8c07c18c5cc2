"""
Participants module - training candidates.
"""

from mou_tracker.modules.participants.models import Candidate
from mou_tracker.modules.participants.router import router

__all__ = ["Candidate", "router"]
