"""按时间流逝刷新属性（由计时器周期调用）。

每项衰减都按「距上次对应照顾的总时长」整体计算，DecayLedger 记下已经结算的部分，
每次只补差额：同一 now 调用两次结果不变，分钟级刷新也不会重复扣减。
"""
import math
from datetime import datetime

from eco_buddy.buddy.models import Buddy
from eco_buddy.buddy.sleep import hours_since, is_asleep, is_night
from eco_buddy.buddy.vitals import adjust
from eco_buddy.config import (
    CLEANLINESS_DECAY_PER_HOUR,
    ENERGY_DRAIN_PER_HOUR,
    ENERGY_RECOVERY_PER_HOUR,
    HUNGER_DECAY_PER_HOUR,
)


def _settle(total_hours: float, rate: float, applied: int) -> tuple:
    """返回 (本次应结算量, 新的累计量)。时钟回拨时不做反向结算。"""
    total = max(0, math.floor(total_hours * rate))
    return max(0, total - applied), max(applied, total)


def update_stats(buddy: Buddy, now: datetime) -> Buddy:
    """返回刷新后的新伙伴，原对象不变。进化不在这里判定，只有 age_one_day 会推进。"""
    b = buddy.model_copy(deep=True)
    # 时钟未前进（重复调用或回拨）时什么都不结算
    if b.last_updated_at is not None and now <= b.last_updated_at:
        return b
    h_fed = hours_since(b.last_fed, now)
    h_cleaned = hours_since(b.last_cleaned, now)
    h_slept = hours_since(b.last_slept, now)

    delta, b.decay.hunger = _settle(h_fed, HUNGER_DECAY_PER_HOUR, b.decay.hunger)
    adjust(b, "hunger", -delta)

    if is_asleep(b, now):
        delta, b.decay.energy_recovery = _settle(h_slept, ENERGY_RECOVERY_PER_HOUR, b.decay.energy_recovery)
        adjust(b, "energy", delta)
    else:
        delta, b.decay.energy_drain = _settle(h_slept, ENERGY_DRAIN_PER_HOUR, b.decay.energy_drain)
        adjust(b, "energy", -delta)

    delta, b.decay.cleanliness = _settle(h_cleaned, CLEANLINESS_DECAY_PER_HOUR, b.decay.cleanliness)
    adjust(b, "cleanliness", -delta)

    # 以下按次结算
    if b.hunger < 30 or b.energy < 30 or b.cleanliness < 30:
        adjust(b, "happiness", -1)
    if is_asleep(b, now) and is_night(now):
        adjust(b, "happiness", 1)
    if b.hunger < 20 or b.energy < 20 or h_slept > 24:
        adjust(b, "health", -1)
    b.last_updated_at = now
    return b
