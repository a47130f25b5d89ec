"""提醒判定、规划与开关存储测试。"""
import json
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from eco_buddy.buddy.models import Buddy, EvolutionStage
from eco_buddy.reminders.alerts import critical_vitals, evolution_imminent, is_critical, level_up_imminent
from eco_buddy.reminders.models import Reminder, ReminderCategory, ReminderSettings, ReminderTrigger
from eco_buddy.reminders.planner import CARE_REMINDER_IDS, CareReminderPlanner, due_between, next_fire_at
from eco_buddy.reminders.store import ReminderSettingsStore

NOON = datetime(2026, 3, 10, 12, 0)  # 周二


def _critical_buddy() -> Buddy:
    b = Buddy.create(NOON, name="Otto")
    b.hunger = 10
    b.energy = 14
    return b


def test_critical_thresholds() -> None:
    assert is_critical("hunger", 19) and not is_critical("hunger", 20)
    assert is_critical("energy", 14) and not is_critical("energy", 15)
    assert is_critical("health", 24) and not is_critical("health", 25)
    assert is_critical("cleanliness", 19) and not is_critical("cleanliness", 20)
    assert not is_critical("happiness", 0)
    assert critical_vitals(_critical_buddy()) == ["hunger", "energy"]


@pytest.mark.parametrize(
    "stage, age, imminent",
    [
        (EvolutionStage.TEEN, 15, True),
        (EvolutionStage.CHILD, 7, False),
        (EvolutionStage.BABY, 2, False),
        (EvolutionStage.ELDER, 60, True),
    ],
)
def test_evolution_imminent(stage: EvolutionStage, age: int, imminent: bool) -> None:
    b = Buddy.create(NOON)
    b.evolution_stage = stage
    b.age = age
    assert evolution_imminent(b) is imminent


def test_level_up_imminent() -> None:
    b = Buddy.create(NOON)
    b.experience = 80
    assert level_up_imminent(b)
    b.experience = 79
    assert not level_up_imminent(b)


def test_trigger_needs_exactly_one_kind() -> None:
    with pytest.raises(ValidationError):
        ReminderTrigger()
    with pytest.raises(ValidationError):
        ReminderTrigger(delay_seconds=5, hour=8)
    assert ReminderTrigger(hour=8).is_calendar
    assert not ReminderTrigger(delay_seconds=5).is_calendar


def test_critical_alerts() -> None:
    reminders = CareReminderPlanner().critical_alerts(_critical_buddy(), NOON)
    assert [r.identifier for r in reminders] == ["hunger_critical", "energy_critical"]
    assert [r.trigger.delay_seconds for r in reminders] == [5, 10]
    assert reminders[0].category == ReminderCategory.BUDDY_CARE
    assert "Otto" in reminders[0].title
    assert "10%" in reminders[0].body


def test_care_reminder_counts() -> None:
    b = Buddy.create(NOON)
    assert len(CareReminderPlanner().plan_care_reminders(b, NOON)) == 12
    no_feeding = CareReminderPlanner(ReminderSettings(feeding_reminders=False))
    assert len(no_feeding.plan_care_reminders(b, NOON)) == 9
    disabled = CareReminderPlanner(ReminderSettings(enabled=False))
    assert disabled.plan_all(_critical_buddy(), NOON) == []


def test_care_identifiers_are_known() -> None:
    reminders = CareReminderPlanner().plan_care_reminders(_critical_buddy(), NOON)
    assert all(r.identifier in CARE_REMINDER_IDS for r in reminders)
    assert len({r.identifier for r in reminders}) == len(reminders)


def test_stat_reminder_times() -> None:
    reminders = CareReminderPlanner().stat_reminders(Buddy.create(NOON), NOON)
    times = {r.identifier: (r.trigger.hour, r.trigger.minute) for r in reminders}
    assert times["feeding_14"] == (14, 0)
    assert times["play_16"] == (16, 30)
    assert times["clean_21"] == (21, 15)


def test_evolution_and_level_up_reminders() -> None:
    planner = CareReminderPlanner()
    b = Buddy.create(NOON)
    assert planner.evolution_reminder(b, NOON) is None
    assert planner.level_up_reminder(b, NOON) is None

    b.evolution_stage = EvolutionStage.TEEN
    b.age = 15
    b.experience = 90
    evo = planner.evolution_reminder(b, NOON)
    lvl = planner.level_up_reminder(b, NOON)
    assert evo.trigger.delay_seconds == 30
    assert lvl.trigger.delay_seconds == 60
    assert "10" in lvl.body

    quiet = CareReminderPlanner(ReminderSettings(evolution_alerts=False))
    assert quiet.evolution_reminder(b, NOON) is None
    assert quiet.level_up_reminder(b, NOON) is None


def test_elder_gets_no_evolution_reminder() -> None:
    b = Buddy.create(NOON)
    b.evolution_stage = EvolutionStage.ELDER
    b.age = 60
    assert evolution_imminent(b)
    assert CareReminderPlanner().evolution_reminder(b, NOON) is None


def test_next_fire_at_daily() -> None:
    morning = CareReminderPlanner().daily_reminders(Buddy.create(NOON), NOON)[0]
    assert morning.identifier == "morning_care"
    assert next_fire_at(morning, datetime(2026, 3, 10, 7, 0)) == datetime(2026, 3, 10, 8, 0)
    assert next_fire_at(morning, datetime(2026, 3, 10, 9, 0)) == datetime(2026, 3, 11, 8, 0)


def test_next_fire_at_weekly() -> None:
    report = CareReminderPlanner().weekly_report(Buddy.create(NOON), NOON)
    assert next_fire_at(report, NOON) == datetime(2026, 3, 15, 10, 0)
    assert next_fire_at(report, datetime(2026, 3, 15, 11, 0)) == datetime(2026, 3, 22, 10, 0)


def test_next_fire_at_delay_is_one_shot() -> None:
    r = Reminder(
        identifier="hunger_critical",
        category=ReminderCategory.BUDDY_CARE,
        title="t",
        body="b",
        trigger=ReminderTrigger(delay_seconds=5),
        scheduled_at=NOON,
    )
    assert next_fire_at(r, NOON) == NOON + timedelta(seconds=5)
    assert next_fire_at(r, NOON + timedelta(seconds=10)) is None


def test_due_between() -> None:
    reminders = CareReminderPlanner().plan_all(_critical_buddy(), NOON)
    due = due_between(reminders, NOON, NOON + timedelta(hours=1))
    assert {r.identifier for r in due} == {"hunger_critical", "energy_critical"}
    afternoon = due_between(reminders, NOON + timedelta(hours=1), NOON + timedelta(hours=2, minutes=30))
    assert {r.identifier for r in afternoon} == {"afternoon_care", "feeding_14"}


def test_settings_store() -> None:
    with tempfile.TemporaryDirectory() as d:
        store = ReminderSettingsStore(data_dir=Path(d))
        assert store.load("u1") == ReminderSettings()
        store.save("u1", ReminderSettings(play_reminders=False))
        assert store.load("u1").play_reminders is False
        assert store.load("u2").play_reminders is True
        assert store.reset("u1") is True
        assert store.reset("u1") is False
        assert store.load("u1").play_reminders is True


def test_settings_store_tolerates_bad_data() -> None:
    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        store = ReminderSettingsStore(data_dir=Path(d))
        assert store.load("u1") == ReminderSettings()

        path.write_text(json.dumps({"u1": {"enabled": "sometimes"}}), encoding="utf-8")
        assert store.load("u1") == ReminderSettings()
