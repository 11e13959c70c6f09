"""Application services (use cases)."""

from .admin_service import AdminService
from .partner_service import PartnerService
from .profile_service import ProfileService

__all__ = [
    "AdminService",
    "PartnerService",
    "ProfileService",
]
