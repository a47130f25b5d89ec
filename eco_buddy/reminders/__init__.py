"""提醒：告急判定、提醒规划与提醒开关。"""
from eco_buddy.reminders.alerts import critical_vitals, evolution_imminent, is_critical, level_up_imminent
from eco_buddy.reminders.models import Reminder, ReminderCategory, ReminderSettings, ReminderTrigger
from eco_buddy.reminders.planner import CARE_REMINDER_IDS, CareReminderPlanner, due_between, next_fire_at
from eco_buddy.reminders.store import ReminderSettingsStore

__all__ = [
    "critical_vitals",
    "evolution_imminent",
    "is_critical",
    "level_up_imminent",
    "Reminder",
    "ReminderCategory",
    "ReminderSettings",
    "ReminderTrigger",
    "CARE_REMINDER_IDS",
    "CareReminderPlanner",
    "due_between",
    "next_fire_at",
    "ReminderSettingsStore",
]
