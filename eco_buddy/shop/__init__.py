"""商店目录与装扮经济。"""
from eco_buddy.shop.catalog import ACCESSORIES, FOODS, OUTFITS, find_accessory, find_food, find_outfit
from eco_buddy.shop.customization import (
    PurchaseQuote,
    equip_accessory,
    equip_outfit,
    purchase,
    purchase_accessory,
    purchase_outfit,
    unequip_accessory,
    unequip_outfit,
)

__all__ = [
    "ACCESSORIES",
    "FOODS",
    "OUTFITS",
    "find_accessory",
    "find_food",
    "find_outfit",
    "PurchaseQuote",
    "equip_accessory",
    "equip_outfit",
    "purchase",
    "purchase_accessory",
    "purchase_outfit",
    "unequip_accessory",
    "unequip_outfit",
]
