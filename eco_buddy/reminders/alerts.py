"""值得提醒的状态判定：属性告急、即将进化、即将升级。"""
from typing import Dict, List

from eco_buddy.buddy.growth import evolution_progress, experience_to_next_level
from eco_buddy.buddy.models import Buddy
from eco_buddy.config import (
    CRITICAL_CLEANLINESS,
    CRITICAL_ENERGY,
    CRITICAL_HEALTH,
    CRITICAL_HUNGER,
    EVOLUTION_IMMINENT_PROGRESS,
    LEVEL_UP_IMMINENT_XP,
)

CRITICAL_THRESHOLDS: Dict[str, int] = {
    "hunger": CRITICAL_HUNGER,
    "energy": CRITICAL_ENERGY,
    "health": CRITICAL_HEALTH,
    "cleanliness": CRITICAL_CLEANLINESS,
}


def is_critical(vital: str, value: int) -> bool:
    """快乐没有告急线，恒为 False。"""
    threshold = CRITICAL_THRESHOLDS.get(vital)
    return threshold is not None and value < threshold


def critical_vitals(buddy: Buddy) -> List[str]:
    return [name for name in CRITICAL_THRESHOLDS if is_critical(name, getattr(buddy, name))]


def evolution_imminent(buddy: Buddy) -> bool:
    return evolution_progress(buddy) > EVOLUTION_IMMINENT_PROGRESS


def level_up_imminent(buddy: Buddy) -> bool:
    return experience_to_next_level(buddy) <= LEVEL_UP_IMMINENT_XP
