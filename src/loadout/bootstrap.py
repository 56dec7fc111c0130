import logging
import os
from pathlib import Path

from loadout.application.services.loadout_service import LoadoutService
from loadout.infrastructure.inmemory.inmemory_equipment_catalog import InMemoryEquipmentCatalog
from loadout.infrastructure.srd_equipment_loader import DEFAULT_EQUIPMENT_DATA, load_equipment_records


DEFAULT_LOG_LEVEL = "WARNING"


def equipment_data_path() -> Path:
    configured = os.getenv("LOADOUT_EQUIPMENT_DATA", "").strip()
    return Path(configured) if configured else DEFAULT_EQUIPMENT_DATA


def configure_logging() -> None:
    level_name = os.getenv("LOADOUT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def create_equipment_catalog(path: str | Path | None = None) -> InMemoryEquipmentCatalog:
    source = Path(path) if path is not None else equipment_data_path()
    return InMemoryEquipmentCatalog(load_equipment_records(source))


def create_loadout_service(catalog: InMemoryEquipmentCatalog | None = None) -> LoadoutService:
    return LoadoutService(catalog if catalog is not None else create_equipment_catalog())
