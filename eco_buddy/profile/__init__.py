"""照顾者档案与权限。"""
from eco_buddy.profile.models import CaregiverProfile, UserRole
from eco_buddy.profile.permission import PermissionChecker, get_role_from_profile

__all__ = [
    "CaregiverProfile",
    "UserRole",
    "PermissionChecker",
    "get_role_from_profile",
]
