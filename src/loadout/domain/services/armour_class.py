from __future__ import annotations

from collections.abc import Sequence

from loadout.domain.models.equipment import Armor, EquipmentItem


SHIELD_BONUS = 2
UNARMORED_BASE = 10


def calculate_armour_class(
    items: Sequence[EquipmentItem],
    dex_modifier: int,
    class_name: str | None = None,
    wis_modifier: int | None = None,
    con_modifier: int | None = None,
) -> int:
    """Armor Class from carried items and ability modifiers.

    The first non-shield armor in ``items`` is treated as worn; any further body
    armor is ignored. A shield adds +2 on top of whatever else applies. Monks
    (no armor, no shield) and Barbarians (no armor) use their unarmored defense
    formula when it beats the regular value. Class names are matched exactly
    (``"Monk"``, ``"Barbarian"``).
    """

    armor_pieces = [item for item in items if isinstance(item, Armor)]
    body_armor = next((piece for piece in armor_pieces if not piece.is_shield), None)
    has_shield = any(piece.is_shield for piece in armor_pieces)

    if body_armor is None:
        armour_class = UNARMORED_BASE + dex_modifier
    elif body_armor.add_dex:
        dex_bonus = dex_modifier
        if body_armor.max_dex_bonus is not None:
            dex_bonus = min(dex_modifier, body_armor.max_dex_bonus)
        armour_class = body_armor.base_ac + dex_bonus
    else:
        armour_class = body_armor.base_ac

    if has_shield:
        armour_class += SHIELD_BONUS

    if body_armor is not None:
        return armour_class

    candidate: int | None = None
    if class_name == "Monk" and not has_shield:
        candidate = UNARMORED_BASE + dex_modifier + (wis_modifier or 0)
    elif class_name == "Barbarian":
        candidate = UNARMORED_BASE + dex_modifier + (con_modifier or 0)
        if has_shield:
            candidate += SHIELD_BONUS

    if candidate is None:
        return armour_class
    return max(armour_class, candidate)
