"""权限管控：高级物种仅对高级会员开放。"""
from typing import Optional

from eco_buddy.buddy.models import Species
from eco_buddy.profile.models import CaregiverProfile, UserRole


def get_role_from_profile(profile: Optional[CaregiverProfile]) -> UserRole:
    """无档案视为免费用户。"""
    if profile is None:
        return UserRole.FREE
    return UserRole.PREMIUM if profile.is_premium else UserRole.FREE


class PermissionChecker:
    """功能权限检查。"""

    @staticmethod
    def can_select_species(role: UserRole, species: Species) -> bool:
        """普通物种所有人可选，高级物种需要会员。"""
        return not species.is_premium or role == UserRole.PREMIUM
