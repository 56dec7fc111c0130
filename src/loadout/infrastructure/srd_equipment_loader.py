from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from loadout.domain.models.equipment import (
    ARMOR_CATEGORIES,
    WEAPON_CATEGORIES,
    Armor,
    EquipmentItem,
    Gear,
    ItemKind,
    Weapon,
    WeaponRange,
)


DEFAULT_EQUIPMENT_DATA = Path(__file__).resolve().parent / "data" / "equipment.json"

logger = logging.getLogger(__name__)


def load_equipment_records(path: str | Path | None = None) -> list[dict]:
    """Read raw catalog records from a JSON list (or a ``{"results": [...]}`` envelope)."""

    source = Path(path) if path is not None else DEFAULT_EQUIPMENT_DATA
    if not source.exists():
        raise FileNotFoundError(f"Equipment dataset not found: {source}")

    raw = json.loads(source.read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        rows = raw.get("results") or raw.get("items") or []
    elif isinstance(raw, list):
        rows = raw
    else:
        rows = []
    return [row for row in rows if isinstance(row, dict)]


def _field(record: Mapping[str, Any], primary: str, alias: str | None = None) -> Any:
    value = record.get(primary)
    if value is None and alias is not None:
        value = record.get(alias)
    return value


def _as_text(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except Exception:
        return None


def _as_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def _as_float(value: Any, default: float = 0.0) -> float:
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except Exception:
        return default


def _category(value: Any, allowed: tuple[str, ...]) -> str | None:
    text = _as_text(value)
    if text is None:
        return None
    lowered = text.lower()
    return lowered if lowered in allowed else None


def _weapon_range(value: Any) -> WeaponRange | None:
    if not isinstance(value, Mapping):
        return None
    normal = _as_int(value.get("normal"))
    long_range = _as_int(value.get("long"))
    if normal is None or long_range is None:
        return None
    return WeaponRange(normal=normal, long=long_range)


def _weapon_from_record(record: Mapping[str, Any], name: str) -> Weapon | None:
    category = _category(record.get("category"), WEAPON_CATEGORIES)
    if category is None:
        return None
    properties = record.get("properties") or []
    if not isinstance(properties, (list, tuple)):
        properties = []
    return Weapon(
        name=name,
        category=category,
        damage=_as_text(record.get("damage")) or "",
        damage_type=(_as_text(_field(record, "damageType", "damage_type")) or "").lower(),
        properties=tuple(str(tag).strip().lower() for tag in properties if str(tag).strip()),
        range=_weapon_range(record.get("range")),
        weight=_as_float(record.get("weight")),
        cost=_as_text(record.get("cost")) or "",
    )


def _armor_from_record(record: Mapping[str, Any], name: str) -> Armor | None:
    category = _category(record.get("category"), ARMOR_CATEGORIES)
    base_ac = _as_int(_field(record, "baseAC", "base_ac"))
    if category is None or base_ac is None:
        return None
    raw_add_dex = _field(record, "addDex", "add_dex")
    if raw_add_dex is None:
        raw_add_dex = _field(record, "dexBonus", "dex_bonus")
    add_dex = _as_bool(raw_add_dex) if raw_add_dex is not None else False
    raw_stealth = _field(record, "stealthDisadvantage", "stealth_disadvantage")
    stealth_disadvantage = _as_bool(raw_stealth) if raw_stealth is not None else False
    if add_dex is None or stealth_disadvantage is None:
        return None
    return Armor(
        name=name,
        category=category,
        base_ac=base_ac,
        add_dex=add_dex,
        max_dex_bonus=_as_int(_field(record, "maxDexBonus", "max_dex_bonus")),
        strength_requirement=_as_int(_field(record, "strengthRequirement", "strength_requirement")),
        stealth_disadvantage=stealth_disadvantage,
        weight=_as_float(record.get("weight")),
        cost=_as_text(record.get("cost")) or "",
    )


def _gear_from_record(record: Mapping[str, Any], name: str) -> Gear:
    quantity = _as_int(record.get("quantity"))
    return Gear(
        name=name,
        description=_as_text(record.get("description")),
        quantity=quantity if quantity is not None and quantity > 0 else None,
        weight=_as_float(record.get("weight")),
        cost=_as_text(record.get("cost")) or "",
    )


def item_from_record(record: Any) -> EquipmentItem | None:
    """Convert one raw record into an item, or ``None`` when it fails the shape check."""

    if not isinstance(record, Mapping):
        return None
    kind = ItemKind.parse(record.get("kind"))
    name = _as_text(record.get("name"))
    if kind is None or name is None:
        return None

    if kind is ItemKind.WEAPON:
        return _weapon_from_record(record, name)
    if kind is ItemKind.ARMOR:
        return _armor_from_record(record, name)
    return _gear_from_record(record, name)
