from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import NoReturn, Union


class ItemKind(str, Enum):
    WEAPON = "weapon"
    ARMOR = "armor"
    GEAR = "gear"

    @classmethod
    def parse(cls, value: object) -> "ItemKind | None":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        for item in cls:
            if item.value == value:
                return item
        return None


WEAPON_CATEGORIES = ("simple", "martial")
ARMOR_CATEGORIES = ("light", "medium", "heavy", "shield")
SHIELD_CATEGORY = "shield"


@dataclass(frozen=True)
class WeaponRange:
    normal: int
    long: int


@dataclass(frozen=True)
class Weapon:
    name: str
    category: str
    damage: str
    damage_type: str
    properties: tuple[str, ...] = ()
    range: WeaponRange | None = None
    weight: float = 0.0
    cost: str = ""

    @property
    def kind(self) -> ItemKind:
        return ItemKind.WEAPON


@dataclass(frozen=True)
class Armor:
    name: str
    category: str
    base_ac: int
    add_dex: bool
    max_dex_bonus: int | None = None
    strength_requirement: int | None = None
    stealth_disadvantage: bool = False
    weight: float = 0.0
    cost: str = ""

    @property
    def kind(self) -> ItemKind:
        return ItemKind.ARMOR

    @property
    def is_shield(self) -> bool:
        return self.category == SHIELD_CATEGORY


@dataclass(frozen=True)
class Gear:
    name: str
    description: str | None = None
    quantity: int | None = None
    weight: float = 0.0
    cost: str = ""

    @property
    def kind(self) -> ItemKind:
        return ItemKind.GEAR


EquipmentItem = Union[Weapon, Armor, Gear]


def unhandled_item(item: object) -> NoReturn:
    """Fail loudly when a consumer meets an item variant it does not know."""

    raise TypeError(f"Unhandled equipment item variant: {type(item).__name__}")


_QUANTITY_SUFFIX = re.compile(r"^(?P<name>.+?)\s+x(?P<quantity>\d+)$", re.IGNORECASE)


@dataclass(frozen=True)
class EquipmentReference:
    name: str
    quantity: int = 1

    def __post_init__(self) -> None:
        if int(self.quantity) < 1:
            raise ValueError(f"Equipment reference quantity must be at least 1: {self.name!r} x{self.quantity}")

    @classmethod
    def parse(cls, text: str) -> "EquipmentReference":
        """Build a reference from authoring shorthand such as ``"Javelin x4"``."""

        raw = str(text or "").strip()
        match = _QUANTITY_SUFFIX.match(raw)
        if match is None:
            return cls(name=raw)
        return cls(name=match.group("name").strip(), quantity=int(match.group("quantity")))


@dataclass(frozen=True)
class EquipmentOption:
    label: str
    references: tuple[EquipmentReference, ...] = ()


@dataclass(frozen=True)
class EquipmentChoice:
    description: str
    options: tuple[EquipmentOption, ...] = ()


@dataclass(frozen=True)
class StartingEquipment:
    fixed: tuple[EquipmentReference, ...] = ()
    choices: tuple[EquipmentChoice, ...] = ()
