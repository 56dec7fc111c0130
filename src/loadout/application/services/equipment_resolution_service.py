from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Sequence

from loadout.domain.models.equipment import (
    Armor,
    EquipmentChoice,
    EquipmentItem,
    EquipmentReference,
    Gear,
    Weapon,
    unhandled_item,
)
from loadout.domain.repositories import EquipmentCatalog


class EquipmentResolutionService:
    """Turns authored references and player choices into concrete items.

    Nothing here raises on bad data: unknown names become plain zero-cost gear
    and unusable selections contribute nothing.
    """

    def __init__(self, catalog: EquipmentCatalog) -> None:
        self.catalog = catalog
        self._logger = logging.getLogger(__name__)

    def lookup_by_name(self, name: str) -> EquipmentItem | None:
        return self.catalog.get_by_name(name)

    def resolve_references(self, references: Sequence[EquipmentReference]) -> List[EquipmentItem]:
        resolved: List[EquipmentItem] = []
        for reference in references:
            resolved.extend(self._resolve_one(reference))
        return resolved

    def _resolve_one(self, reference: EquipmentReference) -> List[EquipmentItem]:
        quantity = reference.quantity
        item = self.catalog.get_by_name(reference.name)
        if item is None:
            self._logger.debug(
                "Equipment reference not in catalog; using plain gear",
                extra={"item_name": reference.name, "quantity": quantity},
            )
            return [Gear(name=reference.name, weight=0.0, cost="0 gp")]

        if quantity <= 1:
            return [item]
        if isinstance(item, Gear):
            return [replace(item, quantity=quantity)]
        if isinstance(item, (Weapon, Armor)):
            return [item] * quantity
        unhandled_item(item)

    def resolve_choices(self, choices: Sequence[EquipmentChoice], selections: Sequence[int | None]) -> List[EquipmentItem]:
        """Resolve the chosen option of every choice, in choice order.

        A missing selection picks option 0. A selection with no matching option
        is skipped; use ``validate_equipment_selections`` to catch that first.
        """

        references: List[EquipmentReference] = []
        for index, choice in enumerate(choices):
            selected = selections[index] if index < len(selections) else None
            option_index = 0 if selected is None else selected
            if not 0 <= option_index < len(choice.options):
                self._logger.debug(
                    "Equipment selection has no matching option; skipped",
                    extra={"choice_index": index, "option_index": option_index},
                )
                continue
            references.extend(choice.options[option_index].references)
        return self.resolve_references(references)


def validate_equipment_selections(choices: Sequence[EquipmentChoice], selections: Sequence[int | None]) -> List[str]:
    errors: List[str] = []
    for index, choice in enumerate(choices):
        selected = selections[index] if index < len(selections) else None
        option_index = 0 if selected is None else selected
        if not choice.options:
            errors.append(f"Choice {index + 1} ({choice.description}) has no options.")
        elif not 0 <= option_index < len(choice.options):
            errors.append(
                f"Choice {index + 1} ({choice.description}): option {option_index} is out of range "
                f"(0-{len(choice.options) - 1})."
            )
    if len(selections) > len(choices):
        errors.append(f"Received {len(selections)} selections for {len(choices)} equipment choices.")
    return errors
