from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterable, List, Optional

from loadout.domain.models.equipment import EquipmentItem
from loadout.domain.repositories import EquipmentCatalog
from loadout.infrastructure.srd_equipment_loader import item_from_record


logger = logging.getLogger(__name__)


class InMemoryEquipmentCatalog(EquipmentCatalog):
    """Read-only name -> item table built once from raw records.

    Records that fail the structural check are skipped. When two records share
    a name, the first one wins.
    """

    def __init__(self, records: Iterable[Any] = ()) -> None:
        items: list[EquipmentItem] = []
        by_name: dict[str, EquipmentItem] = {}
        dropped = 0
        for index, record in enumerate(records):
            item = item_from_record(record)
            if item is None:
                dropped += 1
                logger.debug(
                    "Dropped malformed equipment record",
                    extra={"record_index": index, "record_kind": record.get("kind") if isinstance(record, dict) else None},
                )
                continue
            items.append(item)
            by_name.setdefault(item.name, item)
        self._items: tuple[EquipmentItem, ...] = tuple(items)
        self._by_name = MappingProxyType(by_name)
        logger.info(
            "Equipment catalog built",
            extra={"item_count": len(self._items), "dropped_count": dropped},
        )

    def get_by_name(self, name: str) -> Optional[EquipmentItem]:
        return self._by_name.get(name)

    def list_all(self) -> List[EquipmentItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
