from __future__ import annotations

from collections.abc import Sequence

from loadout.domain.models.equipment import Armor, EquipmentItem, Gear, ItemKind, Weapon, unhandled_item


def categorize_equipment(items: Sequence[EquipmentItem]) -> dict[str, list[EquipmentItem]]:
    """Group items by kind; every kind key is present even when empty."""

    grouped: dict[str, list[EquipmentItem]] = {kind.value: [] for kind in ItemKind}
    for item in items:
        if isinstance(item, Weapon):
            grouped[ItemKind.WEAPON.value].append(item)
        elif isinstance(item, Armor):
            grouped[ItemKind.ARMOR.value].append(item)
        elif isinstance(item, Gear):
            grouped[ItemKind.GEAR.value].append(item)
        else:
            unhandled_item(item)
    return grouped


def total_weight(items: Sequence[EquipmentItem]) -> float:
    total = 0.0
    for item in items:
        quantity = item.quantity if isinstance(item, Gear) and item.quantity else 1
        total += float(item.weight) * quantity
    return round(total, 2)
