"""商店目录：饰品、服装、食物。"""
from typing import List, Optional

from eco_buddy.buddy.models import CASUAL_OUTFIT, Accessory, AccessoryType, Food, Outfit

ACCESSORIES: List[Accessory] = [
    # 帽子
    Accessory(id="sailor_hat", name="Sailor Hat", emoji="🧢", slot=AccessoryType.HAT, cost=50),
    Accessory(id="crown", name="Crown", emoji="👑", slot=AccessoryType.HAT, cost=200, is_premium=True),
    Accessory(id="party_hat", name="Party Hat", emoji="🎉", slot=AccessoryType.HAT, cost=75),
    # 眼镜
    Accessory(id="cool_shades", name="Cool Shades", emoji="🕶️", slot=AccessoryType.GLASSES, cost=60),
    Accessory(id="reading_glasses", name="Reading Glasses", emoji="👓", slot=AccessoryType.GLASSES, cost=40),
    Accessory(id="star_glasses", name="Star Glasses", emoji="⭐", slot=AccessoryType.GLASSES, cost=150, is_premium=True),
    # 项链
    Accessory(id="pearl_necklace", name="Pearl Necklace", emoji="📿", slot=AccessoryType.NECKLACE, cost=80),
    Accessory(id="gold_chain", name="Gold Chain", emoji="🥇", slot=AccessoryType.NECKLACE, cost=120, is_premium=True),
    # 蝴蝶结
    Accessory(id="cute_bow", name="Cute Bow", emoji="🎀", slot=AccessoryType.BOW, cost=30),
    Accessory(id="fancy_bow", name="Fancy Bow", emoji="🌸", slot=AccessoryType.BOW, cost=90, is_premium=True),
]

OUTFITS: List[Outfit] = [
    CASUAL_OUTFIT,
    Outfit(id="formal_suit", name="Formal Suit", emoji="🤵", cost=100),
    Outfit(id="beach_wear", name="Beach Wear", emoji="🏖️", cost=80),
    Outfit(id="winter_coat", name="Winter Coat", emoji="🧥", cost=120),
    Outfit(id="superhero", name="Superhero", emoji="🦸", cost=250, is_premium=True),
    Outfit(id="princess_dress", name="Princess Dress", emoji="👗", cost=200, is_premium=True),
    Outfit(id="pirate_costume", name="Pirate Costume", emoji="🏴‍☠️", cost=180, is_premium=True),
]

FOODS: List[Food] = [
    Food(id="kelp_salad", name="Kelp Salad", emoji="🥬", nutrition=25, cost=8,
         description="Fresh ocean kelp rich in minerals"),
    Food(id="plankton_soup", name="Plankton Soup", emoji="🍲", nutrition=30, cost=10,
         description="Nutritious plankton broth"),
    Food(id="algae_smoothie", name="Algae Smoothie", emoji="🥤", nutrition=20, cost=6,
         description="Refreshing algae blend"),
    Food(id="sea_berries", name="Sea Berries", emoji="🫐", nutrition=15, cost=5,
         description="Sweet ocean berries"),
    Food(id="coral_treats", name="Coral Treats", emoji="🍬", nutrition=35, cost=15,
         description="Premium coral-based snacks"),
    Food(id="seaweed_wraps", name="Seaweed Wraps", emoji="🌯", nutrition=40, cost=18,
         description="Filling seaweed wraps with nutrients"),
]


def find_accessory(accessory_id: str) -> Optional[Accessory]:
    return next((a for a in ACCESSORIES if a.id == accessory_id), None)


def find_outfit(outfit_id: str) -> Optional[Outfit]:
    return next((o for o in OUTFITS if o.id == outfit_id), None)


def find_food(food_id: str) -> Optional[Food]:
    return next((f for f in FOODS if f.id == food_id), None)


def accessories_for_slot(slot: AccessoryType) -> List[Accessory]:
    return [a for a in ACCESSORIES if a.slot == slot]
