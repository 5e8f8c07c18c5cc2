"""
Admins module - admin accounts and the registration approval flow.
"""

from mou_tracker.modules.admins.models import Admin, PendingAdmin, RegistrationStatus
from mou_tracker.modules.admins.router import router

__all__ = ["Admin", "PendingAdmin", "RegistrationStatus", "router"]
