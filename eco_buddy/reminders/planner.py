"""提醒规划：根据伙伴当前状态生成交给外部通知调度器的提醒请求。

这里只负责「该提醒什么、何时触发」，不负责真正投递通知。
"""
from datetime import datetime, timedelta
from typing import List, Optional

from eco_buddy.buddy.growth import experience_to_next_level, next_evolution_requirement
from eco_buddy.buddy.models import Buddy
from eco_buddy.reminders.alerts import critical_vitals, evolution_imminent, level_up_imminent
from eco_buddy.reminders.models import Reminder, ReminderCategory, ReminderSettings, ReminderTrigger

# 每次重新安排照顾提醒前，外部调度器应先撤销这些标识
CARE_REMINDER_IDS = [
    "hunger_critical", "energy_critical", "health_critical", "cleanliness_critical",
    "morning_care", "afternoon_care", "evening_care", "bedtime_care",
    "feeding_10", "feeding_14", "feeding_18",
    "play_11", "play_16", "play_20",
    "clean_9", "clean_21",
]

# 属性告急：(延时秒数, 标题, 正文模板)
_CRITICAL_COPY = {
    "hunger": (5, "🍽️ {name} 饿坏了！", "伙伴急需食物！饱腹度：{value}%"),
    "energy": (10, "😴 {name} 筋疲力尽！", "伙伴需要马上休息！精力：{value}%"),
    "health": (15, "🏥 {name} 需要医疗照顾！", "伙伴的健康很低！健康：{value}%"),
    "cleanliness": (20, "🛁 {name} 该洗澡了！", "伙伴越来越脏了！清洁度：{value}%"),
}

# 每日问候：(标识, 小时, 标题, 正文)
_DAILY_COPY = [
    ("morning_care", 8, "🌅 早上好，{name}！", "用早餐和游戏开始新的一天吧！"),
    ("afternoon_care", 14, "☀️ 午后看看", "{name} 过得怎么样？来照顾一下吧！"),
    ("evening_care", 19, "🌆 傍晚照顾时间", "{name} 需要晚餐和一点游戏时间！"),
    ("bedtime_care", 22, "🌙 {name} 该睡觉了", "帮伙伴准备入睡吧！"),
]

FEEDING_HOURS = (10, 14, 18)
PLAY_HOURS = (11, 16, 20)
CLEAN_HOURS = (9, 21)
WEEKLY_REPORT_WEEKDAY = 6  # 周日
WEEKLY_REPORT_HOUR = 10


def next_fire_at(reminder: Reminder, after: datetime) -> Optional[datetime]:
    """提醒在 after 之后的下一次触发时间；一次性提醒已过期则返回 None。"""
    trigger = reminder.trigger
    if not trigger.is_calendar:
        fire = reminder.scheduled_at + timedelta(seconds=trigger.delay_seconds)
        return fire if fire > after else None
    candidate = after.replace(hour=trigger.hour, minute=trigger.minute, second=0, microsecond=0)
    if trigger.weekday is not None:
        candidate += timedelta(days=(trigger.weekday - candidate.weekday()) % 7)
        if candidate <= after:
            candidate += timedelta(days=7)
    elif candidate <= after:
        candidate += timedelta(days=1)
    return candidate


def due_between(reminders: List[Reminder], start: datetime, end: datetime) -> List[Reminder]:
    """(start, end] 区间内会触发的提醒。"""
    out = []
    for r in reminders:
        fire = next_fire_at(r, start)
        if fire is not None and fire <= end:
            out.append(r)
    return out


class CareReminderPlanner:
    """按伙伴状态与提醒开关生成提醒请求。"""

    def __init__(self, settings: Optional[ReminderSettings] = None):
        self.settings = settings or ReminderSettings()

    def _on(self, flag: str) -> bool:
        return self.settings.enabled and getattr(self.settings, flag)

    def critical_alerts(self, buddy: Buddy, now: datetime) -> List[Reminder]:
        if not self._on("critical_alerts"):
            return []
        out = []
        for vital in critical_vitals(buddy):
            delay, title, body = _CRITICAL_COPY[vital]
            value = getattr(buddy, vital)
            out.append(Reminder(
                identifier=f"{vital}_critical",
                category=ReminderCategory.BUDDY_CARE,
                title=title.format(name=buddy.name),
                body=body.format(value=value),
                trigger=ReminderTrigger(delay_seconds=delay),
                scheduled_at=now,
            ))
        return out

    def daily_reminders(self, buddy: Buddy, now: datetime) -> List[Reminder]:
        if not self._on("daily_reminders"):
            return []
        return [
            Reminder(
                identifier=identifier,
                category=ReminderCategory.DAILY_CARE,
                title=title.format(name=buddy.name),
                body=body.format(name=buddy.name),
                trigger=ReminderTrigger(hour=hour, minute=0, repeats=True),
                scheduled_at=now,
            )
            for identifier, hour, title, body in _DAILY_COPY
        ]

    def stat_reminders(self, buddy: Buddy, now: datetime) -> List[Reminder]:
        out = []
        if self._on("feeding_reminders"):
            for hour in FEEDING_HOURS:
                out.append(self._stat(f"feeding_{hour}", hour, 0, "🍎 喂食时间！",
                                      f"{buddy.name} 有点饿了，来点零食吧！", now))
        if self._on("play_reminders"):
            for hour in PLAY_HOURS:
                out.append(self._stat(f"play_{hour}", hour, 30, "🎮 游戏时间！",
                                      f"{buddy.name} 想玩耍！一起玩能提升快乐。", now))
        if self._on("cleaning_reminders"):
            for hour in CLEAN_HOURS:
                out.append(self._stat(f"clean_{hour}", hour, 15, "🧼 洗澡时间！",
                                      f"{buddy.name} 需要好好清洁一下，保持健康快乐！", now))
        return out

    def _stat(self, identifier: str, hour: int, minute: int, title: str, body: str, now: datetime) -> Reminder:
        return Reminder(
            identifier=identifier,
            category=ReminderCategory.STAT_REMINDER,
            title=title,
            body=body,
            trigger=ReminderTrigger(hour=hour, minute=minute, repeats=True),
            scheduled_at=now,
        )

    def evolution_reminder(self, buddy: Buddy, now: datetime) -> Optional[Reminder]:
        """长老已无下一阶段，不再提醒。"""
        if not self._on("evolution_alerts") or not evolution_imminent(buddy):
            return None
        if next_evolution_requirement(buddy) is None:
            return None
        return Reminder(
            identifier="evolution_ready",
            category=ReminderCategory.EVOLUTION,
            title="🌟 即将进化！",
            body=f"{buddy.name} 快要进化了！继续好好照顾吧！",
            trigger=ReminderTrigger(delay_seconds=30),
            scheduled_at=now,
        )

    def level_up_reminder(self, buddy: Buddy, now: datetime) -> Optional[Reminder]:
        if not self._on("evolution_alerts") or not level_up_imminent(buddy):
            return None
        return Reminder(
            identifier="level_up_soon",
            category=ReminderCategory.LEVEL_UP,
            title="⭐ 即将升级！",
            body=f"{buddy.name} 只差 {experience_to_next_level(buddy)} 点经验就能升级！",
            trigger=ReminderTrigger(delay_seconds=60),
            scheduled_at=now,
        )

    def weekly_report(self, buddy: Buddy, now: datetime) -> Optional[Reminder]:
        if not self._on("weekly_reports"):
            return None
        return Reminder(
            identifier="weekly_report",
            category=ReminderCategory.WEEKLY_REPORT,
            title="📊 伙伴周报",
            body=f"看看 {buddy.name} 这周的成长！{buddy.level} 级，{buddy.evolution_stage.value} 阶段。",
            trigger=ReminderTrigger(hour=WEEKLY_REPORT_HOUR, weekday=WEEKLY_REPORT_WEEKDAY, repeats=True),
            scheduled_at=now,
        )

    def plan_care_reminders(self, buddy: Buddy, now: datetime) -> List[Reminder]:
        """告急 + 每日 + 喂食/玩耍/清洁，标识都在 CARE_REMINDER_IDS 内。"""
        return (
            self.critical_alerts(buddy, now)
            + self.daily_reminders(buddy, now)
            + self.stat_reminders(buddy, now)
        )

    def plan_all(self, buddy: Buddy, now: datetime) -> List[Reminder]:
        out = self.plan_care_reminders(buddy, now)
        for extra in (
            self.evolution_reminder(buddy, now),
            self.level_up_reminder(buddy, now),
            self.weekly_report(buddy, now),
        ):
            if extra is not None:
                out.append(extra)
        return out
