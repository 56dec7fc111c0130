from __future__ import annotations

from typing import Mapping, Sequence

from loadout.application.dtos import EquipmentChoiceView, LoadoutItemView, LoadoutView
from loadout.domain.models.equipment import Armor, EquipmentChoice, EquipmentItem, Gear, Weapon, unhandled_item


def _item_detail(item: EquipmentItem) -> tuple[str, str]:
    if isinstance(item, Weapon):
        detail = f"{item.damage} {item.damage_type}".strip()
        if item.range is not None:
            detail = f"{detail}, range {item.range.normal}/{item.range.long}"
        return item.category, detail
    if isinstance(item, Armor):
        if item.is_shield:
            return item.category, f"+{item.base_ac} AC"
        if not item.add_dex:
            return item.category, f"AC {item.base_ac}"
        if item.max_dex_bonus is not None:
            return item.category, f"AC {item.base_ac} + Dex (max {item.max_dex_bonus})"
        return item.category, f"AC {item.base_ac} + Dex"
    if isinstance(item, Gear):
        return "gear", item.description or ""
    unhandled_item(item)


def to_loadout_item_view(*, item: EquipmentItem, proficient: bool) -> LoadoutItemView:
    category, detail = _item_detail(item)
    quantity = item.quantity if isinstance(item, Gear) and item.quantity else 1
    return LoadoutItemView(
        name=item.name,
        kind=item.kind.value,
        category=category,
        detail=detail,
        quantity=quantity,
        weight=float(item.weight),
        proficient=proficient,
    )


def to_equipment_choice_view(*, choice: EquipmentChoice, selected_index: int) -> EquipmentChoiceView:
    return EquipmentChoiceView(
        description=choice.description,
        option_labels=[option.label for option in choice.options],
        selected_index=selected_index,
    )


def to_loadout_view(
    *,
    class_name: str,
    background_name: str,
    armour_class: int,
    items: Sequence[LoadoutItemView],
    grouped: Mapping[str, Sequence[EquipmentItem]],
    choices: Sequence[EquipmentChoiceView],
    total_weight: float,
    selection_errors: Sequence[str],
) -> LoadoutView:
    return LoadoutView(
        class_name=class_name,
        background_name=background_name,
        armour_class=int(armour_class),
        items=list(items),
        counts_by_kind={kind: len(rows) for kind, rows in grouped.items()},
        choices=list(choices),
        total_weight=total_weight,
        selection_errors=list(selection_errors),
    )
