"""伙伴（虚拟宠物）数据模型：属性、成长、装扮。"""
import uuid
from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from eco_buddy.config import (
    DEFAULT_CLEANLINESS,
    DEFAULT_ENERGY,
    DEFAULT_HAPPINESS,
    DEFAULT_HEALTH,
    DEFAULT_HOURS_SINCE_SLEEP,
    DEFAULT_HUNGER,
    VITAL_MAX,
    VITAL_MIN,
)


class Species(str, Enum):
    """物种；海牛与白鲸为高级物种。"""
    SEA_OTTER = "sea_otter"
    SEA_TURTLE = "sea_turtle"
    DOLPHIN = "dolphin"
    WHALE = "whale"
    MANATEE = "manatee"
    BELUGA_WHALE = "beluga_whale"

    @property
    def display_name(self) -> str:
        return _SPECIES_NAMES[self]

    @property
    def emoji(self) -> str:
        return _SPECIES_EMOJI[self]

    @property
    def is_premium(self) -> bool:
        return self in (Species.MANATEE, Species.BELUGA_WHALE)


_SPECIES_NAMES = {
    Species.SEA_OTTER: "Sea Otter",
    Species.SEA_TURTLE: "Sea Turtle",
    Species.DOLPHIN: "Dolphin",
    Species.WHALE: "Whale",
    Species.MANATEE: "Manatee",
    Species.BELUGA_WHALE: "Beluga Whale",
}

_SPECIES_EMOJI = {
    Species.SEA_OTTER: "🦦",
    Species.SEA_TURTLE: "🐢",
    Species.DOLPHIN: "🐬",
    Species.WHALE: "🐋",
    Species.MANATEE: "🦭",
    Species.BELUGA_WHALE: "🐋",
}


class Mood(str, Enum):
    """心情：由五项属性均值推导，不单独存储。"""
    ECSTATIC = "ecstatic"
    HAPPY = "happy"
    CONTENT = "content"
    SAD = "sad"
    SICK = "sick"

    @classmethod
    def from_wellbeing(cls, wellbeing: int) -> "Mood":
        if wellbeing >= 80:
            return cls.ECSTATIC
        if wellbeing >= 60:
            return cls.HAPPY
        if wellbeing >= 40:
            return cls.CONTENT
        if wellbeing >= 20:
            return cls.SAD
        return cls.SICK

    @property
    def emoji(self) -> str:
        return {
            Mood.ECSTATIC: "🤩",
            Mood.HAPPY: "😊",
            Mood.CONTENT: "😌",
            Mood.SAD: "😢",
            Mood.SICK: "🤒",
        }[self]


class EvolutionStage(str, Enum):
    """进化阶段，只能向前。"""
    BABY = "baby"
    CHILD = "child"
    TEEN = "teen"
    ADULT = "adult"
    ELDER = "elder"

    @property
    def rank(self) -> int:
        return list(EvolutionStage).index(self)

    @property
    def size_multiplier(self) -> float:
        return {
            EvolutionStage.BABY: 0.7,
            EvolutionStage.CHILD: 0.85,
            EvolutionStage.TEEN: 1.0,
            EvolutionStage.ADULT: 1.2,
            EvolutionStage.ELDER: 1.1,
        }[self]


class AccessoryType(str, Enum):
    """饰品槽位：每个槽位最多装备一件。"""
    HAT = "hat"
    GLASSES = "glasses"
    NECKLACE = "necklace"
    BOW = "bow"


class Accessory(BaseModel):
    """饰品。"""
    id: str = Field(..., description="饰品唯一 ID")
    name: str = Field(..., description="名称")
    emoji: str = Field(..., description="展示用表情")
    slot: AccessoryType = Field(..., description="槽位")
    cost: int = Field(..., ge=0, description="价格（生态币）")
    is_premium: bool = Field(False, description="是否高级饰品")


class Outfit(BaseModel):
    """服装。"""
    id: str = Field(..., description="服装唯一 ID")
    name: str = Field(..., description="名称")
    emoji: str = Field(..., description="展示用表情")
    cost: int = Field(..., ge=0, description="价格（生态币）")
    is_premium: bool = Field(False, description="是否高级服装")


class Food(BaseModel):
    """食物。"""
    id: str = Field(..., description="食物唯一 ID")
    name: str = Field(..., description="名称")
    emoji: str = Field(..., description="展示用表情")
    nutrition: int = Field(..., ge=0, description="营养值，直接加到饱腹度")
    cost: int = Field(..., ge=0, description="价格（生态币）")
    description: str = Field("", description="简介")


# 免费的默认服装，每只伙伴出生即拥有
CASUAL_OUTFIT = Outfit(id="casual", name="Casual", emoji="👕", cost=0)


class DecayLedger(BaseModel):
    """自对应照顾动作以来已结算的衰减量；同一时刻重复刷新不会重复扣减。"""
    hunger: int = Field(0, ge=0)
    cleanliness: int = Field(0, ge=0)
    energy_drain: int = Field(0, ge=0)
    energy_recovery: int = Field(0, ge=0)


class Buddy(BaseModel):
    """伙伴实体：每个用户一只，会话内不销毁。"""
    id: str = Field(default_factory=lambda: uuid.uuid4().hex, description="伙伴唯一 ID")
    name: str = Field("Buddy", description="显示名，可编辑")
    species: Species = Field(Species.SEA_OTTER, description="物种")

    happiness: int = Field(DEFAULT_HAPPINESS, description="快乐 0~100")
    health: int = Field(DEFAULT_HEALTH, description="健康 0~100")
    hunger: int = Field(DEFAULT_HUNGER, description="饱腹 0~100，越低越饿")
    energy: int = Field(DEFAULT_ENERGY, description="精力 0~100")
    cleanliness: int = Field(DEFAULT_CLEANLINESS, description="清洁 0~100")

    last_fed: datetime = Field(default_factory=datetime.now, description="上次喂食")
    last_played: datetime = Field(default_factory=datetime.now, description="上次玩耍")
    last_cleaned: datetime = Field(default_factory=datetime.now, description="上次清洁")
    last_slept: datetime = Field(
        default_factory=lambda: datetime.now() - timedelta(hours=DEFAULT_HOURS_SINCE_SLEEP),
        description="上次睡觉",
    )

    age: int = Field(0, ge=0, description="年龄（天）")
    experience: int = Field(0, ge=0, description="当前等级内的经验")
    level: int = Field(1, ge=1, description="等级")
    evolution_stage: EvolutionStage = Field(EvolutionStage.BABY, description="进化阶段")

    owned_accessories: List[Accessory] = Field(default_factory=list, description="已拥有饰品")
    equipped_accessories: Dict[AccessoryType, Accessory] = Field(
        default_factory=dict, description="按槽位装备的饰品"
    )
    owned_outfits: List[Outfit] = Field(
        default_factory=lambda: [CASUAL_OUTFIT.model_copy()], description="已拥有服装"
    )
    current_outfit: Optional[Outfit] = Field(None, description="当前服装")

    last_updated_at: Optional[datetime] = Field(None, description="上次时间刷新")
    decay: DecayLedger = Field(default_factory=DecayLedger, description="衰减结算记录")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("happiness", "health", "hunger", "energy", "cleanliness", mode="before")
    @classmethod
    def _clamp_vital(cls, value: object) -> int:
        # 越界一律截断，不拒绝
        return max(VITAL_MIN, min(VITAL_MAX, int(value)))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overall_wellbeing(self) -> int:
        return (self.happiness + self.health + self.hunger + self.energy + self.cleanliness) // 5

    @computed_field  # type: ignore[prop-decorator]
    @property
    def mood(self) -> Mood:
        return Mood.from_wellbeing(self.overall_wellbeing)

    @classmethod
    def create(
        cls,
        now: datetime,
        name: str = "Buddy",
        species: Species = Species.SEA_OTTER,
    ) -> "Buddy":
        """以固定默认属性创建新伙伴，所有照顾时间以 now 为准。"""
        return cls(
            name=name.strip() or "Buddy",
            species=species,
            last_fed=now,
            last_played=now,
            last_cleaned=now,
            last_slept=now - timedelta(hours=DEFAULT_HOURS_SINCE_SLEEP),
            last_updated_at=now,
        )

    def owns_accessory(self, accessory_id: str) -> bool:
        return any(a.id == accessory_id for a in self.owned_accessories)

    def owns_outfit(self, outfit_id: str) -> bool:
        return any(o.id == outfit_id for o in self.owned_outfits)


class ActionOutcome(str, Enum):
    """操作结果；失败均为无副作用的空操作。"""
    SUCCESS = "success"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    ALREADY_OWNED = "already_owned"
    NOT_OWNED = "not_owned"
    LOCKED = "locked"  # 需要高级会员
    INVALID_NAME = "invalid_name"


class ActionResult(BaseModel):
    """照顾 / 购买 / 装备操作的返回值。"""
    outcome: ActionOutcome = Field(..., description="结果")
    balance: Optional[int] = Field(None, description="操作后的生态币余额")
    levels_gained: int = Field(0, ge=0, description="本次升级数")

    @property
    def ok(self) -> bool:
        return self.outcome == ActionOutcome.SUCCESS
