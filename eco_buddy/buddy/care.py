"""照顾动作：喂食、玩耍、清洁、医疗、休息、抚摸。

每个动作先检查余额，通过后才扣费并修改伙伴；余额不足时什么都不变。
"""
from datetime import datetime

from eco_buddy.buddy.growth import gain_experience
from eco_buddy.buddy.models import ActionOutcome, ActionResult, Buddy, Food
from eco_buddy.buddy.sleep import is_night
from eco_buddy.buddy.vitals import adjust
from eco_buddy.config import (
    CLEAN_COST,
    CLEAN_EXPERIENCE,
    MEDICAL_COST,
    MEDICAL_EXPERIENCE,
    PET_INTERACTION_EXPERIENCE,
    PLAY_COST,
    PLAY_EXPERIENCE,
    REST_COST,
    REST_DAY_EXPERIENCE,
    REST_NIGHT_EXPERIENCE,
    VITAL_MAX,
)
from eco_buddy.profile.models import CaregiverProfile


def _insufficient(wallet: CaregiverProfile) -> ActionResult:
    return ActionResult(outcome=ActionOutcome.INSUFFICIENT_FUNDS, balance=wallet.eco_credits)


def feed(buddy: Buddy, wallet: CaregiverProfile, food: Food, now: datetime) -> ActionResult:
    """按食物营养值加饱腹，快乐 +营养/3，健康 +营养/5。"""
    if not wallet.spend(food.cost):
        return _insufficient(wallet)
    adjust(buddy, "hunger", food.nutrition)
    adjust(buddy, "happiness", food.nutrition // 3)
    adjust(buddy, "health", food.nutrition // 5)
    buddy.last_fed = now
    buddy.decay.hunger = 0
    return ActionResult(outcome=ActionOutcome.SUCCESS, balance=wallet.eco_credits)


def play(buddy: Buddy, wallet: CaregiverProfile, now: datetime) -> ActionResult:
    if not wallet.spend(PLAY_COST):
        return _insufficient(wallet)
    adjust(buddy, "happiness", 20)
    adjust(buddy, "energy", -10)
    buddy.last_played = now
    levels = gain_experience(buddy, PLAY_EXPERIENCE)
    return ActionResult(outcome=ActionOutcome.SUCCESS, balance=wallet.eco_credits, levels_gained=levels)


def clean(buddy: Buddy, wallet: CaregiverProfile, now: datetime) -> ActionResult:
    if not wallet.spend(CLEAN_COST):
        return _insufficient(wallet)
    adjust(buddy, "cleanliness", 30)
    adjust(buddy, "happiness", 10)
    buddy.last_cleaned = now
    buddy.decay.cleanliness = 0
    levels = gain_experience(buddy, CLEAN_EXPERIENCE)
    return ActionResult(outcome=ActionOutcome.SUCCESS, balance=wallet.eco_credits, levels_gained=levels)


def medical_care(buddy: Buddy, wallet: CaregiverProfile, now: datetime) -> ActionResult:
    """健康直接回满，不是累加。"""
    if not wallet.spend(MEDICAL_COST):
        return _insufficient(wallet)
    buddy.health = VITAL_MAX
    levels = gain_experience(buddy, MEDICAL_EXPERIENCE)
    return ActionResult(outcome=ActionOutcome.SUCCESS, balance=wallet.eco_credits, levels_gained=levels)


def rest(buddy: Buddy, wallet: CaregiverProfile, now: datetime) -> ActionResult:
    """夜里休息收益更大。"""
    if not wallet.spend(REST_COST):
        return _insufficient(wallet)
    if is_night(now):
        adjust(buddy, "energy", 40)
        adjust(buddy, "happiness", 10)
        levels = gain_experience(buddy, REST_NIGHT_EXPERIENCE)
    else:
        adjust(buddy, "energy", 25)
        adjust(buddy, "happiness", 5)
        levels = gain_experience(buddy, REST_DAY_EXPERIENCE)
    buddy.last_slept = now
    buddy.decay.energy_drain = 0
    buddy.decay.energy_recovery = 0
    return ActionResult(outcome=ActionOutcome.SUCCESS, balance=wallet.eco_credits, levels_gained=levels)


def pet_interaction(buddy: Buddy) -> ActionResult:
    """点一下伙伴：免费，快乐 +2。"""
    adjust(buddy, "happiness", 2)
    levels = gain_experience(buddy, PET_INTERACTION_EXPERIENCE)
    return ActionResult(outcome=ActionOutcome.SUCCESS, levels_gained=levels)
