"""经验升级、长大与进化测试。"""
from datetime import datetime

import pytest

from eco_buddy.buddy.growth import (
    EVOLUTION_TABLE,
    age_one_day,
    check_evolution,
    evolution_progress,
    experience_to_next_level,
    gain_experience,
    next_evolution_requirement,
)
from eco_buddy.buddy.models import Buddy, EvolutionStage
from eco_buddy.buddy.vitals import VITALS

NOON = datetime(2026, 3, 10, 12, 0)


def _buddy(vitals: int = 80, **fields) -> Buddy:
    b = Buddy.create(NOON)
    for name in VITALS:
        setattr(b, name, vitals)
    for key, value in fields.items():
        setattr(b, key, value)
    return b


def test_single_level_up() -> None:
    b = Buddy.create(NOON)
    assert gain_experience(b, 250) == 1
    assert b.level == 2
    assert b.experience == 150
    assert b.happiness == 85
    assert b.health == 90


def test_large_gain_levels_up_repeatedly() -> None:
    b = Buddy.create(NOON)
    assert gain_experience(b, 1000) == 4
    assert b.level == 5
    assert b.experience == 0
    assert b.happiness == 100
    assert b.health == 100
    assert b.experience < b.level * 100


def test_non_positive_gain_is_ignored() -> None:
    b = Buddy.create(NOON)
    assert gain_experience(b, 0) == 0
    assert gain_experience(b, -10) == 0
    assert b.experience == 0 and b.level == 1


def test_experience_to_next_level() -> None:
    b = _buddy(level=3, experience=250)
    assert experience_to_next_level(b) == 50


def test_age_into_child() -> None:
    b = _buddy(60, age=2)
    report = age_one_day(b)
    assert b.age == 3
    assert b.evolution_stage == EvolutionStage.CHILD
    assert b.happiness == 70
    assert b.experience == 56
    assert report.evolved
    assert report.evolved_from == EvolutionStage.BABY
    assert report.evolved_to == EvolutionStage.CHILD
    assert report.experience_gained == 56


def test_poor_care_stalls_evolution() -> None:
    b = _buddy(40, age=2)
    report = age_one_day(b)
    assert b.age == 3
    assert b.evolution_stage == EvolutionStage.BABY
    assert not report.evolved
    assert b.experience == 4


def test_age_gain_is_at_least_one() -> None:
    b = _buddy(5)
    age_one_day(b)
    assert b.experience == 1


def test_teen_evolution_bonus() -> None:
    b = _buddy(65, age=10, level=5)
    report = check_evolution(b)
    assert b.evolution_stage == EvolutionStage.TEEN
    assert b.health == 80
    assert b.experience == 100
    assert report.evolved_to == EvolutionStage.TEEN


def test_teen_needs_level() -> None:
    b = _buddy(90, age=10, level=2, evolution_stage=EvolutionStage.CHILD)
    assert not check_evolution(b).evolved
    assert b.evolution_stage == EvolutionStage.CHILD


def test_evolution_never_regresses() -> None:
    b = _buddy(90, age=1, evolution_stage=EvolutionStage.ADULT)
    report = check_evolution(b)
    assert not report.evolved
    assert b.evolution_stage == EvolutionStage.ADULT


def test_elder_bonus_flows_through_leveling() -> None:
    b = _buddy(90, age=31, level=15, experience=1400, evolution_stage=EvolutionStage.ADULT)
    report = check_evolution(b)
    assert b.evolution_stage == EvolutionStage.ELDER
    # 1400 + 500 = 1900 ≥ 1500 → 升到 16 级，余 400
    assert report.levels_gained == 1
    assert b.level == 16
    assert b.experience == 400


@pytest.mark.parametrize(
    "stage, age, progress",
    [
        (EvolutionStage.BABY, 0, 0.0),
        (EvolutionStage.BABY, 1, 1 / 3),
        (EvolutionStage.CHILD, 5, 0.4),
        (EvolutionStage.TEEN, 15, 0.875),
        (EvolutionStage.ADULT, 40, 1.0),
        (EvolutionStage.ELDER, 50, 1.0),
    ],
)
def test_evolution_progress(stage: EvolutionStage, age: int, progress: float) -> None:
    b = _buddy(age=age, evolution_stage=stage)
    assert evolution_progress(b) == pytest.approx(progress)


def test_next_requirement() -> None:
    b = _buddy(evolution_stage=EvolutionStage.CHILD)
    req = next_evolution_requirement(b)
    assert req.stage == EvolutionStage.TEEN
    assert (req.min_age, req.min_wellbeing, req.min_level) == (8, 60, 3)
    assert next_evolution_requirement(_buddy(evolution_stage=EvolutionStage.ELDER)) is None


def test_table_is_ordered_by_stage() -> None:
    assert [r.stage.rank for r in EVOLUTION_TABLE] == [0, 1, 2, 3, 4]
