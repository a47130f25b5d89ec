"""提醒请求与提醒开关数据模型。"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReminderCategory(str, Enum):
    """提醒类别，对应外部通知调度器的分类。"""
    BUDDY_CARE = "buddy_care"        # 属性告急
    DAILY_CARE = "daily_care"        # 每日问候
    STAT_REMINDER = "stat_reminder"  # 喂食/玩耍/清洁
    EVOLUTION = "evolution"
    LEVEL_UP = "level_up"
    WEEKLY_REPORT = "weekly_report"


class ReminderTrigger(BaseModel):
    """触发方式：延时一次，或按日历每天/每周的固定时刻。"""
    delay_seconds: Optional[int] = Field(None, gt=0, description="延时秒数（一次性）")
    hour: Optional[int] = Field(None, ge=0, le=23, description="日历触发的小时")
    minute: int = Field(0, ge=0, le=59, description="日历触发的分钟")
    weekday: Optional[int] = Field(None, ge=0, le=6, description="每周触发：0=周一 … 6=周日")
    repeats: bool = Field(False, description="是否重复")

    @model_validator(mode="after")
    def _one_kind(self) -> "ReminderTrigger":
        if (self.delay_seconds is None) == (self.hour is None):
            raise ValueError("delay_seconds 与 hour 必须且只能设置一个")
        return self

    @property
    def is_calendar(self) -> bool:
        return self.hour is not None


class Reminder(BaseModel):
    """交给外部调度器的一条提醒请求。"""
    identifier: str = Field(..., description="唯一标识，重复安排时覆盖同名提醒")
    category: ReminderCategory = Field(..., description="类别")
    title: str = Field(..., description="标题")
    body: str = Field(..., description="正文")
    trigger: ReminderTrigger = Field(..., description="触发方式")
    scheduled_at: datetime = Field(..., description="生成时间，延时提醒从这里起算")

    model_config = ConfigDict(use_enum_values=True)


class ReminderSettings(BaseModel):
    """提醒开关（本地偏好）。"""
    enabled: bool = Field(True, description="总开关")
    critical_alerts: bool = Field(True, description="属性告急")
    daily_reminders: bool = Field(True, description="每日问候")
    feeding_reminders: bool = Field(True, description="喂食")
    play_reminders: bool = Field(True, description="玩耍")
    cleaning_reminders: bool = Field(True, description="清洁")
    evolution_alerts: bool = Field(True, description="进化与升级")
    weekly_reports: bool = Field(True, description="周报")
