"""伙伴模拟核心：属性、作息、衰减、成长与照顾动作。"""
from eco_buddy.buddy.models import (
    Accessory,
    AccessoryType,
    ActionOutcome,
    ActionResult,
    Buddy,
    EvolutionStage,
    Food,
    Mood,
    Outfit,
    Species,
)
from eco_buddy.buddy.decay import update_stats
from eco_buddy.buddy.growth import age_one_day, gain_experience
from eco_buddy.buddy.sleep import is_asleep
from eco_buddy.buddy.vitals import derive_mood

__all__ = [
    "Accessory",
    "AccessoryType",
    "ActionOutcome",
    "ActionResult",
    "Buddy",
    "EvolutionStage",
    "Food",
    "Mood",
    "Outfit",
    "Species",
    "update_stats",
    "age_one_day",
    "gain_experience",
    "is_asleep",
    "derive_mood",
]
