"""作息推断：是否在睡、距离就寝/起床还有几小时。

睡眠不是持久化的开关，而是由精力、距上次睡觉的时长和本地时钟推出来的。
"""
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from eco_buddy.buddy.models import Buddy
from eco_buddy.config import NIGHT_END_HOUR, NIGHT_START_HOUR

SECONDS_PER_HOUR = 3600.0


class SleepStatus(str, Enum):
    """展示用作息状态。"""
    SLEEPING = "sleeping"
    NIGHT_SLEEPY = "night_sleepy"  # 夜里，开始犯困
    TIRED = "tired"                # 醒着超过 12 小时
    AWAKE = "awake"


class CountdownTarget(str, Enum):
    MORNING = "morning"
    BEDTIME = "bedtime"
    NOW = "now"  # 已到就寝时间


class SleepCountdown(BaseModel):
    """距下一个作息节点的整小时数。"""
    target: CountdownTarget = Field(..., description="下一个节点")
    hours: int = Field(..., ge=0, description="剩余小时")


def hours_since(then: datetime, now: datetime) -> float:
    return (now - then).total_seconds() / SECONDS_PER_HOUR


def is_night(now: datetime) -> bool:
    """本地时间 22:00 ~ 06:00。"""
    return now.hour >= NIGHT_START_HOUR or now.hour < NIGHT_END_HOUR


def is_asleep(buddy: Buddy, now: datetime) -> bool:
    """精力 < 20、醒着超过 16 小时、或夜里且精力 < 60 时视为睡着。"""
    return (
        buddy.energy < 20
        or hours_since(buddy.last_slept, now) > 16
        or (is_night(now) and buddy.energy < 60)
    )


def sleep_status(buddy: Buddy, now: datetime) -> SleepStatus:
    if is_asleep(buddy, now):
        return SleepStatus.SLEEPING
    if is_night(now):
        return SleepStatus.NIGHT_SLEEPY
    if hours_since(buddy.last_slept, now) > 12:
        return SleepStatus.TIRED
    return SleepStatus.AWAKE


def sleep_countdown(now: datetime) -> SleepCountdown:
    if now.hour < NIGHT_END_HOUR:
        return SleepCountdown(target=CountdownTarget.MORNING, hours=NIGHT_END_HOUR - now.hour)
    if now.hour < NIGHT_START_HOUR:
        return SleepCountdown(target=CountdownTarget.BEDTIME, hours=NIGHT_START_HOUR - now.hour)
    return SleepCountdown(target=CountdownTarget.NOW, hours=0)
