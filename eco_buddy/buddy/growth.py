"""成长：经验升级、按天长大、进化状态机。"""
import sys
from typing import List, Optional

from pydantic import BaseModel, Field

from eco_buddy.buddy.models import Buddy, EvolutionStage
from eco_buddy.buddy.vitals import adjust, overall_wellbeing
from eco_buddy.config import (
    EXPERIENCE_PER_LEVEL,
    LEVEL_UP_HAPPINESS_BONUS,
    LEVEL_UP_HEALTH_BONUS,
)


class EvolutionRequirement(BaseModel):
    """进入某阶段的门槛：年龄区间 + 照顾质量 + 等级，需同时满足。"""
    stage: EvolutionStage
    min_age: int = Field(..., ge=0)
    max_age: Optional[int] = Field(None, description="None 表示无上限")
    min_wellbeing: int = 0
    min_level: int = 1

    def matches(self, age: int, level: int, wellbeing: int) -> bool:
        if age < self.min_age or (self.max_age is not None and age > self.max_age):
            return False
        return wellbeing >= self.min_wellbeing and level >= self.min_level


class EvolutionBonus(BaseModel):
    happiness: int = 0
    health: int = 0
    experience: int = 0


class GrowthReport(BaseModel):
    """一次长大 / 获得经验的结果，供提醒与展示使用。"""
    experience_gained: int = 0
    levels_gained: int = 0
    evolved_from: Optional[EvolutionStage] = None
    evolved_to: Optional[EvolutionStage] = None

    @property
    def evolved(self) -> bool:
        return self.evolved_to is not None


# 按顺序匹配，第一个命中的生效；都不命中则保持当前阶段
EVOLUTION_TABLE: List[EvolutionRequirement] = [
    EvolutionRequirement(stage=EvolutionStage.BABY, min_age=0, max_age=2),
    EvolutionRequirement(stage=EvolutionStage.CHILD, min_age=3, max_age=7, min_wellbeing=50),
    EvolutionRequirement(stage=EvolutionStage.TEEN, min_age=8, max_age=15, min_wellbeing=60, min_level=3),
    EvolutionRequirement(stage=EvolutionStage.ADULT, min_age=16, max_age=30, min_wellbeing=70, min_level=8),
    EvolutionRequirement(stage=EvolutionStage.ELDER, min_age=31, min_wellbeing=80, min_level=15),
]

EVOLUTION_BONUSES = {
    EvolutionStage.CHILD: EvolutionBonus(happiness=10, experience=50),
    EvolutionStage.TEEN: EvolutionBonus(health=15, experience=100),
    EvolutionStage.ADULT: EvolutionBonus(happiness=20, health=20, experience=200),
    EvolutionStage.ELDER: EvolutionBonus(experience=500),
}


def experience_threshold(level: int) -> int:
    return level * EXPERIENCE_PER_LEVEL


def experience_to_next_level(buddy: Buddy) -> int:
    return experience_threshold(buddy.level) - buddy.experience


def gain_experience(buddy: Buddy, amount: int) -> int:
    """增加经验并循环升级，返回升了几级。经验一次跨过多个门槛会连升多级。"""
    if amount <= 0:
        return 0
    buddy.experience += amount
    levels = 0
    while buddy.experience >= experience_threshold(buddy.level):
        buddy.experience -= experience_threshold(buddy.level)
        buddy.level += 1
        levels += 1
        adjust(buddy, "happiness", LEVEL_UP_HAPPINESS_BONUS)
        adjust(buddy, "health", LEVEL_UP_HEALTH_BONUS)
    if levels:
        print(f"[伙伴-成长] {buddy.name} 升到 {buddy.level} 级", file=sys.stderr, flush=True)
    return levels


def _target_stage(buddy: Buddy) -> EvolutionStage:
    wellbeing = overall_wellbeing(buddy)
    for req in EVOLUTION_TABLE:
        if req.matches(buddy.age, buddy.level, wellbeing):
            return req.stage
    return buddy.evolution_stage


def check_evolution(buddy: Buddy) -> GrowthReport:
    """按当前年龄/等级/照顾质量判定进化；只前进不后退，进化时一次性发放奖励。"""
    target = _target_stage(buddy)
    if target.rank <= buddy.evolution_stage.rank:
        return GrowthReport()
    old = buddy.evolution_stage
    buddy.evolution_stage = target
    bonus = EVOLUTION_BONUSES.get(target, EvolutionBonus())
    adjust(buddy, "happiness", bonus.happiness)
    adjust(buddy, "health", bonus.health)
    levels = gain_experience(buddy, bonus.experience)
    print(f"[伙伴-成长] {buddy.name} 进化: {old.value} -> {target.value}", file=sys.stderr, flush=True)
    return GrowthReport(
        experience_gained=bonus.experience,
        levels_gained=levels,
        evolved_from=old,
        evolved_to=target,
    )


def age_one_day(buddy: Buddy) -> GrowthReport:
    """长大一天：按照顾质量给 1~10 点经验，然后检查升级与进化。"""
    buddy.age += 1
    gained = max(1, overall_wellbeing(buddy) // 10)
    levels = gain_experience(buddy, gained)
    evolution = check_evolution(buddy)
    return GrowthReport(
        experience_gained=gained + evolution.experience_gained,
        levels_gained=levels + evolution.levels_gained,
        evolved_from=evolution.evolved_from,
        evolved_to=evolution.evolved_to,
    )


def evolution_progress(buddy: Buddy) -> float:
    """当前阶段年龄区间内的进度，0~1。"""
    stage = buddy.evolution_stage
    if stage == EvolutionStage.ELDER:
        return 1.0
    req = next(r for r in EVOLUTION_TABLE if r.stage == stage)
    span = req.max_age - req.min_age + 1
    return max(0.0, min(1.0, (buddy.age - req.min_age) / span))


def next_evolution_requirement(buddy: Buddy) -> Optional[EvolutionRequirement]:
    """下一阶段的门槛；已是长老返回 None。"""
    rank = buddy.evolution_stage.rank
    if rank + 1 >= len(EVOLUTION_TABLE):
        return None
    return EVOLUTION_TABLE[rank + 1]
