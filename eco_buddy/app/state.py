"""应用状态：显式持有伙伴与照顾者档案，并以注入的时钟驱动所有操作。

界面、计时器、提醒等组件都拿同一个 AppState 实例，不通过全局变量访问伙伴。
"""
from datetime import date, datetime
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from eco_buddy.buddy import care
from eco_buddy.buddy.decay import update_stats
from eco_buddy.buddy.growth import (
    EvolutionRequirement,
    GrowthReport,
    age_one_day,
    evolution_progress,
    experience_to_next_level,
    next_evolution_requirement,
)
from eco_buddy.buddy.models import (
    Accessory,
    AccessoryType,
    ActionResult,
    Buddy,
    EvolutionStage,
    Food,
    Mood,
    Outfit,
    Species,
)
from eco_buddy.buddy.sleep import SleepCountdown, SleepStatus, is_asleep, sleep_countdown, sleep_status
from eco_buddy.buddy.vitals import needs_attention
from eco_buddy.profile.models import CaregiverProfile
from eco_buddy.profile.permission import get_role_from_profile
from eco_buddy.reminders.alerts import critical_vitals
from eco_buddy.shop import customization

Clock = Callable[[], datetime]


class BuddySnapshot(BaseModel):
    """展示层读取的只读快照。"""
    name: str
    species: Species
    appearance: str
    happiness: int
    health: int
    hunger: int
    energy: int
    cleanliness: int
    mood: Mood
    wellbeing: int
    age: int
    level: int
    experience: int
    experience_to_next_level: int
    evolution_stage: EvolutionStage
    evolution_progress: float
    next_evolution: Optional[EvolutionRequirement] = None
    is_asleep: bool
    sleep_status: SleepStatus
    sleep_countdown: SleepCountdown
    needs_attention: bool
    critical_vitals: List[str] = Field(default_factory=list)
    equipped_accessories: Dict[AccessoryType, str] = Field(default_factory=dict)
    current_outfit: Optional[str] = None
    eco_credits: int
    taken_at: datetime


class AppState:
    """单只伙伴 + 单个照顾者；所有写操作串行发生在这里。"""

    def __init__(
        self,
        clock: Clock = datetime.now,
        profile: Optional[CaregiverProfile] = None,
        buddy: Optional[Buddy] = None,
    ):
        self.clock = clock
        now = clock()
        self.profile = profile or CaregiverProfile()
        self.buddy = buddy or Buddy.create(now)
        self.last_aged_on: date = now.date()

    # 时间驱动

    def update_stats(self) -> Buddy:
        self.buddy = update_stats(self.buddy, self.clock())
        return self.buddy

    def age_one_day(self) -> GrowthReport:
        return age_one_day(self.buddy)

    def advance_calendar(self) -> List[GrowthReport]:
        """本地日期每跨过一天，伙伴长大一天；时钟回拨时不做任何事。"""
        today = self.clock().date()
        days = (today - self.last_aged_on).days
        reports = []
        for _ in range(max(0, days)):
            reports.append(age_one_day(self.buddy))
        if days > 0:
            self.last_aged_on = today
        return reports

    # 照顾动作

    def feed(self, food: Food) -> ActionResult:
        return care.feed(self.buddy, self.profile, food, self.clock())

    def play(self) -> ActionResult:
        return care.play(self.buddy, self.profile, self.clock())

    def clean(self) -> ActionResult:
        return care.clean(self.buddy, self.profile, self.clock())

    def medical_care(self) -> ActionResult:
        return care.medical_care(self.buddy, self.profile, self.clock())

    def rest(self) -> ActionResult:
        return care.rest(self.buddy, self.profile, self.clock())

    def pet(self) -> ActionResult:
        return care.pet_interaction(self.buddy)

    # 装扮

    def purchase_accessory(self, accessory: Accessory) -> ActionResult:
        return customization.purchase_accessory(self.buddy, self.profile, accessory)

    def purchase_outfit(self, outfit: Outfit) -> ActionResult:
        return customization.purchase_outfit(self.buddy, self.profile, outfit)

    def equip_accessory(self, accessory: Accessory) -> ActionResult:
        return customization.equip_accessory(self.buddy, accessory)

    def unequip_accessory(self, slot: AccessoryType) -> ActionResult:
        return customization.unequip_accessory(self.buddy, slot)

    def equip_outfit(self, outfit: Outfit) -> ActionResult:
        return customization.equip_outfit(self.buddy, outfit)

    def unequip_outfit(self) -> ActionResult:
        return customization.unequip_outfit(self.buddy)

    def select_species(self, species: Species) -> ActionResult:
        return customization.select_species(self.buddy, species, get_role_from_profile(self.profile))

    def rename(self, name: str) -> ActionResult:
        return customization.rename(self.buddy, name)

    def snapshot(self) -> BuddySnapshot:
        now = self.clock()
        b = self.buddy
        return BuddySnapshot(
            name=b.name,
            species=b.species,
            appearance=customization.customized_appearance(b),
            happiness=b.happiness,
            health=b.health,
            hunger=b.hunger,
            energy=b.energy,
            cleanliness=b.cleanliness,
            mood=b.mood,
            wellbeing=b.overall_wellbeing,
            age=b.age,
            level=b.level,
            experience=b.experience,
            experience_to_next_level=experience_to_next_level(b),
            evolution_stage=b.evolution_stage,
            evolution_progress=evolution_progress(b),
            next_evolution=next_evolution_requirement(b),
            is_asleep=is_asleep(b, now),
            sleep_status=sleep_status(b, now),
            sleep_countdown=sleep_countdown(now),
            needs_attention=needs_attention(b),
            critical_vitals=critical_vitals(b),
            equipped_accessories={slot: item.id for slot, item in b.equipped_accessories.items()},
            current_outfit=b.current_outfit.id if b.current_outfit else None,
            eco_credits=self.profile.eco_credits,
            taken_at=now,
        )
