"""五项属性的截断、均值与心情推导。"""
from eco_buddy.buddy.models import Buddy, Mood
from eco_buddy.config import VITAL_MAX, VITAL_MIN

VITALS = ("happiness", "health", "hunger", "energy", "cleanliness")


def clamp_vital(value: int) -> int:
    return max(VITAL_MIN, min(VITAL_MAX, value))


def overall_wellbeing(buddy: Buddy) -> int:
    """照顾质量：五项属性的整数均值（向下取整）。"""
    return sum(getattr(buddy, name) for name in VITALS) // len(VITALS)


def derive_mood(buddy: Buddy) -> Mood:
    """80+ 狂喜，60+ 开心，40+ 平静，20+ 难过，其余生病。"""
    return Mood.from_wellbeing(overall_wellbeing(buddy))


def needs_attention(buddy: Buddy) -> bool:
    return buddy.hunger < 30 or buddy.energy < 20 or buddy.cleanliness < 25 or buddy.health < 30


def adjust(buddy: Buddy, vital: str, delta: int) -> int:
    """给某项属性加减并截断到 [0, 100]，返回新值。"""
    if vital not in VITALS:
        raise ValueError(f"未知属性: {vital}")
    value = clamp_vital(getattr(buddy, vital) + delta)
    setattr(buddy, vital, value)
    return value
