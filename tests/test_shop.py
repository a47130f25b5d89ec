"""商店与装扮测试。"""
from datetime import datetime

from eco_buddy.buddy.models import ActionOutcome, AccessoryType, Buddy, Species
from eco_buddy.profile.models import CaregiverProfile, UserRole
from eco_buddy.shop.catalog import ACCESSORIES, FOODS, OUTFITS, accessories_for_slot, find_accessory, find_outfit
from eco_buddy.shop.customization import (
    customized_appearance,
    equip_accessory,
    equip_outfit,
    purchase,
    purchase_accessory,
    purchase_outfit,
    rename,
    select_species,
    unequip_accessory,
    unequip_outfit,
)

NOON = datetime(2026, 3, 10, 12, 0)


def test_catalog_ids_are_unique() -> None:
    for items in (ACCESSORIES, OUTFITS, FOODS):
        ids = [i.id for i in items]
        assert len(ids) == len(set(ids))
    assert {a.id for a in accessories_for_slot(AccessoryType.BOW)} == {"cute_bow", "fancy_bow"}
    assert find_accessory("nope") is None


def test_pure_purchase() -> None:
    ok = purchase(50, "sailor_hat", 100, [])
    assert ok.ok and ok.balance == 50 and ok.owned_ids == frozenset({"sailor_hat"})

    poor = purchase(50, "sailor_hat", 40, [])
    assert poor.outcome == ActionOutcome.INSUFFICIENT_FUNDS
    assert poor.balance == 40 and poor.owned_ids == frozenset()

    dup = purchase(50, "sailor_hat", 100, ["sailor_hat"])
    assert dup.outcome == ActionOutcome.ALREADY_OWNED
    assert dup.balance == 100


def test_purchase_accessory_is_atomic() -> None:
    b = Buddy.create(NOON)
    wallet = CaregiverProfile()
    hat = find_accessory("sailor_hat")

    assert purchase_accessory(b, wallet, hat).ok
    assert wallet.eco_credits == 50
    assert b.owns_accessory("sailor_hat")

    again = purchase_accessory(b, wallet, hat)
    assert again.outcome == ActionOutcome.ALREADY_OWNED
    assert wallet.eco_credits == 50
    assert [a.id for a in b.owned_accessories] == ["sailor_hat"]

    crown = find_accessory("crown")
    poor = purchase_accessory(b, wallet, crown)
    assert poor.outcome == ActionOutcome.INSUFFICIENT_FUNDS
    assert not b.owns_accessory("crown")
    assert wallet.eco_credits == 50


def test_purchase_outfit() -> None:
    b = Buddy.create(NOON)
    wallet = CaregiverProfile(eco_credits=150)
    suit = find_outfit("formal_suit")
    assert purchase_outfit(b, wallet, suit).balance == 50
    assert b.owns_outfit("formal_suit")
    assert purchase_outfit(b, wallet, find_outfit("casual")).outcome == ActionOutcome.ALREADY_OWNED


def test_equip_requires_ownership() -> None:
    b = Buddy.create(NOON)
    result = equip_accessory(b, find_accessory("cool_shades"))
    assert result.outcome == ActionOutcome.NOT_OWNED
    assert b.equipped_accessories == {}
    assert equip_outfit(b, find_outfit("superhero")).outcome == ActionOutcome.NOT_OWNED
    assert b.current_outfit is None


def test_one_accessory_per_slot() -> None:
    b = Buddy.create(NOON)
    wallet = CaregiverProfile(eco_credits=500)
    sailor, party = find_accessory("sailor_hat"), find_accessory("party_hat")
    purchase_accessory(b, wallet, sailor)
    purchase_accessory(b, wallet, party)

    equip_accessory(b, sailor)
    equip_accessory(b, party)
    assert len(b.equipped_accessories) == 1
    assert b.equipped_accessories[AccessoryType.HAT].id == "party_hat"

    unequip_accessory(b, AccessoryType.HAT)
    assert b.equipped_accessories == {}
    assert b.owns_accessory("party_hat")


def test_appearance_order() -> None:
    b = Buddy.create(NOON, species=Species.DOLPHIN)
    wallet = CaregiverProfile(eco_credits=1000)
    for item_id in ("cute_bow", "sailor_hat", "cool_shades"):
        item = find_accessory(item_id)
        purchase_accessory(b, wallet, item)
        equip_accessory(b, item)
    assert customized_appearance(b) == "🐬🧢🕶️🎀"

    equip_outfit(b, find_outfit("casual"))
    assert customized_appearance(b) == "🐬🧢🕶️🎀"

    suit = find_outfit("formal_suit")
    purchase_outfit(b, wallet, suit)
    equip_outfit(b, suit)
    assert customized_appearance(b) == "🐬🧢🕶️🎀🤵"

    unequip_outfit(b)
    assert b.current_outfit is None


def test_premium_species_is_locked_for_free_users() -> None:
    b = Buddy.create(NOON)
    result = select_species(b, Species.MANATEE, UserRole.FREE)
    assert result.outcome == ActionOutcome.LOCKED
    assert b.species == Species.SEA_OTTER
    assert select_species(b, Species.WHALE, UserRole.FREE).ok
    assert select_species(b, Species.BELUGA_WHALE, UserRole.PREMIUM).ok
    assert b.species == Species.BELUGA_WHALE


def test_rename_ignores_blank() -> None:
    b = Buddy.create(NOON, name="Otto")
    result = rename(b, "   ")
    assert result.outcome == ActionOutcome.INVALID_NAME
    assert not result.ok
    assert b.name == "Otto"
    assert rename(b, " Pip ").ok
    assert b.name == "Pip"
