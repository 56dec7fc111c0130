from __future__ import annotations

from typing import Iterable, List, Sequence

from loadout.application.dtos import LoadoutView
from loadout.application.mappers.loadout_mapper import (
    to_equipment_choice_view,
    to_loadout_item_view,
    to_loadout_view,
)
from loadout.application.services.equipment_resolution_service import (
    EquipmentResolutionService,
    validate_equipment_selections,
)
from loadout.domain.models.equipment import EquipmentItem
from loadout.domain.models.stats import AbilityScores
from loadout.domain.repositories import EquipmentCatalog
from loadout.domain.services.armour_class import calculate_armour_class
from loadout.domain.services.inventory import categorize_equipment, total_weight
from loadout.domain.services.proficiency import can_use_equipment
from loadout.domain.services.starting_equipment_catalog import (
    background_equipment_for,
    class_display_name,
    proficiencies_for_class,
    starting_equipment_for_class,
)


class LoadoutService:
    def __init__(self, catalog: EquipmentCatalog) -> None:
        self.resolver = EquipmentResolutionService(catalog)

    def resolve_inventory(
        self,
        class_name: str | None,
        background_name: str | None = None,
        selections: Sequence[int | None] = (),
    ) -> List[EquipmentItem]:
        starting = starting_equipment_for_class(class_name)
        inventory = self.resolver.resolve_choices(starting.choices, selections)
        inventory.extend(self.resolver.resolve_references(starting.fixed))
        inventory.extend(self.resolver.resolve_references(background_equipment_for(background_name)))
        return inventory

    def build_loadout(
        self,
        class_name: str | None,
        background_name: str | None = None,
        selections: Sequence[int | None] = (),
        scores: AbilityScores | None = None,
        extra_proficiencies: Iterable[str] = (),
    ) -> LoadoutView:
        scores = scores or AbilityScores()
        starting = starting_equipment_for_class(class_name)
        inventory = self.resolve_inventory(class_name, background_name, selections)
        proficiencies = [*proficiencies_for_class(class_name), *extra_proficiencies]

        armour_class = calculate_armour_class(
            inventory,
            scores.dexterity_mod,
            class_display_name(class_name),
            scores.wisdom_mod,
            scores.constitution_mod,
        )
        items = [to_loadout_item_view(item=item, proficient=can_use_equipment(item, proficiencies)) for item in inventory]
        choices = []
        for index, choice in enumerate(starting.choices):
            selected = selections[index] if index < len(selections) else None
            choices.append(to_equipment_choice_view(choice=choice, selected_index=0 if selected is None else selected))

        return to_loadout_view(
            class_name=str(class_name or ""),
            background_name=str(background_name or ""),
            armour_class=armour_class,
            items=items,
            grouped=categorize_equipment(inventory),
            choices=choices,
            total_weight=total_weight(inventory),
            selection_errors=validate_equipment_selections(starting.choices, selections),
        )
