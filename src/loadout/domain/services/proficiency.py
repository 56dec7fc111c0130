from __future__ import annotations

from collections.abc import Iterable

from loadout.domain.models.equipment import Armor, EquipmentItem, Gear, Weapon, unhandled_item


SHIELD_PROFICIENCY = "shields"


def normalize_proficiencies(tokens: Iterable[str] | None) -> set[str]:
    return {str(token).strip().lower() for token in (tokens or ()) if str(token).strip()}


def weapon_proficiency_token(weapon_name: str) -> str:
    """Pluralized weapon-specific token, e.g. ``"Crossbow, Light"`` -> ``"light crossbows"``.

    Only the regular ``+s`` plural is produced; irregular plurals are not handled.
    """

    lowered = str(weapon_name or "").lower()
    if ", " in lowered:
        base, qualifier = lowered.split(", ", 1)
        return f"{qualifier} {base}s"
    return f"{lowered}s"


def can_use_equipment(item: EquipmentItem, proficiencies: Iterable[str] | None) -> bool:
    if isinstance(item, Gear):
        return True

    tokens = normalize_proficiencies(proficiencies)
    if isinstance(item, Armor):
        if item.is_shield:
            return SHIELD_PROFICIENCY in tokens
        return item.category in tokens
    if isinstance(item, Weapon):
        if item.category in tokens:
            return True
        return weapon_proficiency_token(item.name) in tokens

    unhandled_item(item)
