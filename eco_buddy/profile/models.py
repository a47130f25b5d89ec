"""照顾者档案与用户角色数据模型。"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from eco_buddy.config import STARTING_ECO_CREDITS


class UserRole(str, Enum):
    """用户角色：高级会员可选高级物种与高级装扮。"""
    PREMIUM = "premium"
    FREE = "free"


class CaregiverProfile(BaseModel):
    """照顾者档案；生态币余额属于照顾者而不是伙伴。"""
    name: str = Field("Eco Warrior", description="显示名，可由登录信息填充")
    level: int = Field(1, ge=1, description="照顾者等级")
    eco_credits: int = Field(STARTING_ECO_CREDITS, ge=0, description="当前生态币余额")
    total_eco_credits: int = Field(0, ge=0, description="累计获得的生态币")
    sustainability_score: float = Field(0.0, ge=0.0, description="可持续评分")
    is_premium: bool = Field(False, description="是否高级会员")

    model_config = ConfigDict(validate_assignment=True)

    def can_afford(self, cost: int) -> bool:
        return self.eco_credits >= cost

    def earn(self, amount: int) -> int:
        """记入环保活动奖励，返回新余额。"""
        if amount > 0:
            self.eco_credits += amount
            self.total_eco_credits += amount
        return self.eco_credits

    def spend(self, cost: int) -> bool:
        """扣费；余额不足时不扣并返回 False。"""
        if cost < 0 or not self.can_afford(cost):
            return False
        self.eco_credits -= cost
        return True
