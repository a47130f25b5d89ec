"""装扮经济：购买、装备、卸下，以及物种选择。

购买是原子的：余额足够且尚未拥有时，扣费与加入已拥有同时发生；否则什么都不变。
装备只接受已拥有的物品，同一槽位只能有一件。
"""
import sys
from typing import FrozenSet, Iterable

from pydantic import BaseModel, Field

from eco_buddy.buddy.models import (
    Accessory,
    AccessoryType,
    ActionOutcome,
    ActionResult,
    Buddy,
    CASUAL_OUTFIT,
    Outfit,
    Species,
)
from eco_buddy.profile.models import CaregiverProfile, UserRole
from eco_buddy.profile.permission import PermissionChecker

# 显示顺序：帽子、眼镜、项链、蝴蝶结
_APPEARANCE_ORDER = (AccessoryType.HAT, AccessoryType.GLASSES, AccessoryType.NECKLACE, AccessoryType.BOW)


class PurchaseQuote(BaseModel):
    """纯函数形式的购买结果：新余额与新的已拥有集合。"""
    outcome: ActionOutcome
    balance: int = Field(..., ge=0)
    owned_ids: FrozenSet[str] = Field(default_factory=frozenset)

    @property
    def ok(self) -> bool:
        return self.outcome == ActionOutcome.SUCCESS


def purchase(cost: int, item_id: str, balance: int, owned_ids: Iterable[str]) -> PurchaseQuote:
    """余额足够且未拥有才成功；失败时原样返回余额与集合。"""
    owned = frozenset(owned_ids)
    if balance < cost:
        return PurchaseQuote(outcome=ActionOutcome.INSUFFICIENT_FUNDS, balance=balance, owned_ids=owned)
    if item_id in owned:
        return PurchaseQuote(outcome=ActionOutcome.ALREADY_OWNED, balance=balance, owned_ids=owned)
    return PurchaseQuote(outcome=ActionOutcome.SUCCESS, balance=balance - cost, owned_ids=owned | {item_id})


def purchase_accessory(buddy: Buddy, wallet: CaregiverProfile, accessory: Accessory) -> ActionResult:
    quote = purchase(
        accessory.cost,
        accessory.id,
        wallet.eco_credits,
        (a.id for a in buddy.owned_accessories),
    )
    if not quote.ok:
        print(f"[伙伴-商店] 购买 {accessory.name} 失败: {quote.outcome.value}", file=sys.stderr, flush=True)
        return ActionResult(outcome=quote.outcome, balance=wallet.eco_credits)
    wallet.eco_credits = quote.balance
    buddy.owned_accessories = buddy.owned_accessories + [accessory.model_copy()]
    return ActionResult(outcome=ActionOutcome.SUCCESS, balance=wallet.eco_credits)


def purchase_outfit(buddy: Buddy, wallet: CaregiverProfile, outfit: Outfit) -> ActionResult:
    quote = purchase(
        outfit.cost,
        outfit.id,
        wallet.eco_credits,
        (o.id for o in buddy.owned_outfits),
    )
    if not quote.ok:
        print(f"[伙伴-商店] 购买 {outfit.name} 失败: {quote.outcome.value}", file=sys.stderr, flush=True)
        return ActionResult(outcome=quote.outcome, balance=wallet.eco_credits)
    wallet.eco_credits = quote.balance
    buddy.owned_outfits = buddy.owned_outfits + [outfit.model_copy()]
    return ActionResult(outcome=ActionOutcome.SUCCESS, balance=wallet.eco_credits)


def equip_accessory(buddy: Buddy, accessory: Accessory) -> ActionResult:
    """装备到对应槽位，替换该槽位原有饰品；未拥有时不做任何事。"""
    owned = next((a for a in buddy.owned_accessories if a.id == accessory.id), None)
    if owned is None:
        return ActionResult(outcome=ActionOutcome.NOT_OWNED)
    equipped = dict(buddy.equipped_accessories)
    equipped[owned.slot] = owned
    buddy.equipped_accessories = equipped
    return ActionResult(outcome=ActionOutcome.SUCCESS)


def unequip_accessory(buddy: Buddy, slot: AccessoryType) -> ActionResult:
    equipped = dict(buddy.equipped_accessories)
    equipped.pop(slot, None)
    buddy.equipped_accessories = equipped
    return ActionResult(outcome=ActionOutcome.SUCCESS)


def equip_outfit(buddy: Buddy, outfit: Outfit) -> ActionResult:
    owned = next((o for o in buddy.owned_outfits if o.id == outfit.id), None)
    if owned is None:
        return ActionResult(outcome=ActionOutcome.NOT_OWNED)
    buddy.current_outfit = owned
    return ActionResult(outcome=ActionOutcome.SUCCESS)


def unequip_outfit(buddy: Buddy) -> ActionResult:
    buddy.current_outfit = None
    return ActionResult(outcome=ActionOutcome.SUCCESS)


def customized_appearance(buddy: Buddy) -> str:
    """物种表情 + 已装备饰品 + 服装（默认便服不显示）。"""
    parts = [buddy.species.emoji]
    for slot in _APPEARANCE_ORDER:
        item = buddy.equipped_accessories.get(slot)
        if item is not None:
            parts.append(item.emoji)
    outfit = buddy.current_outfit
    if outfit is not None and outfit.id != CASUAL_OUTFIT.id:
        parts.append(outfit.emoji)
    return "".join(parts)


def select_species(buddy: Buddy, species: Species, role: UserRole) -> ActionResult:
    """重新选择物种；高级物种需要会员。"""
    if not PermissionChecker.can_select_species(role, species):
        return ActionResult(outcome=ActionOutcome.LOCKED)
    buddy.species = species
    return ActionResult(outcome=ActionOutcome.SUCCESS)


def rename(buddy: Buddy, name: str) -> ActionResult:
    """空白名字不改名。"""
    name = name.strip()
    if not name:
        return ActionResult(outcome=ActionOutcome.INVALID_NAME)
    buddy.name = name
    return ActionResult(outcome=ActionOutcome.SUCCESS)
