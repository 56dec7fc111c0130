from __future__ import annotations

from collections.abc import Mapping, Sequence

from loadout.domain.models.equipment import (
    EquipmentChoice,
    EquipmentOption,
    EquipmentReference,
    StartingEquipment,
)


def _refs(*entries: str) -> tuple[EquipmentReference, ...]:
    return tuple(EquipmentReference.parse(entry) for entry in entries)


def _option(label: str, *entries: str) -> EquipmentOption:
    return EquipmentOption(label=label, references=_refs(*entries))


def _choice(description: str, *options: EquipmentOption) -> EquipmentChoice:
    return EquipmentChoice(description=description, options=tuple(options))


_PACK_DUNGEON_OR_EXPLORER = _choice(
    "Choose a pack",
    _option("(a) a dungeoneer's pack", "Dungeoneer's Pack"),
    _option("(b) an explorer's pack", "Explorer's Pack"),
)

_CASTER_FOCUS = _choice(
    "Choose a spellcasting focus",
    _option("(a) a component pouch", "Component Pouch"),
    _option("(b) an arcane focus", "Arcane Focus"),
)


CLASS_STARTING_EQUIPMENT: Mapping[str, StartingEquipment] = {
    "barbarian": StartingEquipment(
        fixed=_refs("Explorer's Pack", "Javelin x4"),
        choices=(
            _choice(
                "Choose a primary weapon",
                _option("(a) a greataxe", "Greataxe"),
                _option("(b) a battleaxe", "Battleaxe"),
            ),
            _choice(
                "Choose a secondary weapon",
                _option("(a) two handaxes", "Handaxe x2"),
                _option("(b) a club", "Club"),
            ),
        ),
    ),
    "bard": StartingEquipment(
        fixed=_refs("Leather Armor", "Dagger"),
        choices=(
            _choice(
                "Choose a weapon",
                _option("(a) a rapier", "Rapier"),
                _option("(b) a longsword", "Longsword"),
                _option("(c) a dagger", "Dagger"),
            ),
            _choice(
                "Choose a pack",
                _option("(a) a diplomat's pack", "Diplomat's Pack"),
                _option("(b) an entertainer's pack", "Entertainer's Pack"),
            ),
            _choice(
                "Choose a musical instrument",
                _option("(a) a lute", "Lute"),
                _option("(b) a flute", "Flute"),
            ),
        ),
    ),
    "cleric": StartingEquipment(
        fixed=_refs("Shield", "Holy Symbol"),
        choices=(
            _choice(
                "Choose a weapon",
                _option("(a) a mace", "Mace"),
                _option("(b) a warhammer", "Warhammer"),
            ),
            _choice(
                "Choose armor",
                _option("(a) scale mail", "Scale Mail"),
                _option("(b) leather armor", "Leather Armor"),
                _option("(c) chain mail", "Chain Mail"),
            ),
            _choice(
                "Choose a ranged option",
                _option("(a) a light crossbow and 20 bolts", "Crossbow, Light", "Crossbow Bolt x20"),
                _option("(b) a spear", "Spear"),
            ),
            _choice(
                "Choose a pack",
                _option("(a) a priest's pack", "Priest's Pack"),
                _option("(b) an explorer's pack", "Explorer's Pack"),
            ),
        ),
    ),
    "druid": StartingEquipment(
        fixed=_refs("Leather Armor", "Explorer's Pack", "Druidic Focus"),
        choices=(
            _choice(
                "Choose a shield or a simple weapon",
                _option("(a) a wooden shield", "Shield"),
                _option("(b) a quarterstaff", "Quarterstaff"),
            ),
            _choice(
                "Choose a melee weapon",
                _option("(a) a scimitar", "Scimitar"),
                _option("(b) a club", "Club"),
            ),
        ),
    ),
    "fighter": StartingEquipment(
        choices=(
            _choice(
                "Choose armor",
                _option("(a) chain mail", "Chain Mail"),
                _option("(b) leather armor, longbow, and 20 arrows", "Leather Armor", "Longbow", "Arrow x20"),
            ),
            _choice(
                "Choose martial weapons",
                _option("(a) a longsword and a shield", "Longsword", "Shield"),
                _option("(b) a battleaxe and a longsword", "Battleaxe", "Longsword"),
            ),
            _choice(
                "Choose a ranged option",
                _option("(a) a light crossbow and 20 bolts", "Crossbow, Light", "Crossbow Bolt x20"),
                _option("(b) two handaxes", "Handaxe x2"),
            ),
            _PACK_DUNGEON_OR_EXPLORER,
        ),
    ),
    "monk": StartingEquipment(
        fixed=_refs("Dart x10"),
        choices=(
            _choice(
                "Choose a weapon",
                _option("(a) a shortsword", "Shortsword"),
                _option("(b) a quarterstaff", "Quarterstaff"),
            ),
            _PACK_DUNGEON_OR_EXPLORER,
        ),
    ),
    "paladin": StartingEquipment(
        fixed=_refs("Chain Mail", "Holy Symbol"),
        choices=(
            _choice(
                "Choose martial weapons",
                _option("(a) a longsword and a shield", "Longsword", "Shield"),
                _option("(b) a longsword and a warhammer", "Longsword", "Warhammer"),
            ),
            _choice(
                "Choose a secondary weapon",
                _option("(a) five javelins", "Javelin x5"),
                _option("(b) a mace", "Mace"),
            ),
            _choice(
                "Choose a pack",
                _option("(a) a priest's pack", "Priest's Pack"),
                _option("(b) an explorer's pack", "Explorer's Pack"),
            ),
        ),
    ),
    "ranger": StartingEquipment(
        fixed=_refs("Longbow", "Arrow x20"),
        choices=(
            _choice(
                "Choose armor",
                _option("(a) scale mail", "Scale Mail"),
                _option("(b) leather armor", "Leather Armor"),
            ),
            _choice(
                "Choose melee weapons",
                _option("(a) two shortswords", "Shortsword x2"),
                _option("(b) two handaxes", "Handaxe x2"),
            ),
            _PACK_DUNGEON_OR_EXPLORER,
        ),
    ),
    "rogue": StartingEquipment(
        fixed=_refs("Leather Armor", "Dagger x2", "Thieves' Tools"),
        choices=(
            _choice(
                "Choose a melee weapon",
                _option("(a) a rapier", "Rapier"),
                _option("(b) a shortsword", "Shortsword"),
            ),
            _choice(
                "Choose a ranged option",
                _option("(a) a shortbow and 20 arrows", "Shortbow", "Arrow x20"),
                _option("(b) a shortsword", "Shortsword"),
            ),
            _choice(
                "Choose a pack",
                _option("(a) a burglar's pack", "Burglar's Pack"),
                _option("(b) a dungeoneer's pack", "Dungeoneer's Pack"),
                _option("(c) an explorer's pack", "Explorer's Pack"),
            ),
        ),
    ),
    "sorcerer": StartingEquipment(
        fixed=_refs("Dagger x2"),
        choices=(
            _choice(
                "Choose a weapon",
                _option("(a) a light crossbow and 20 bolts", "Crossbow, Light", "Crossbow Bolt x20"),
                _option("(b) a quarterstaff", "Quarterstaff"),
            ),
            _CASTER_FOCUS,
            _PACK_DUNGEON_OR_EXPLORER,
        ),
    ),
    "warlock": StartingEquipment(
        fixed=_refs("Leather Armor", "Sickle", "Dagger x2"),
        choices=(
            _choice(
                "Choose a weapon",
                _option("(a) a light crossbow and 20 bolts", "Crossbow, Light", "Crossbow Bolt x20"),
                _option("(b) a quarterstaff", "Quarterstaff"),
            ),
            _CASTER_FOCUS,
            _choice(
                "Choose a pack",
                _option("(a) a scholar's pack", "Scholar's Pack"),
                _option("(b) a dungeoneer's pack", "Dungeoneer's Pack"),
            ),
        ),
    ),
    "wizard": StartingEquipment(
        fixed=_refs("Spellbook"),
        choices=(
            _choice(
                "Choose a weapon",
                _option("(a) a quarterstaff", "Quarterstaff"),
                _option("(b) a dagger", "Dagger"),
            ),
            _CASTER_FOCUS,
            _choice(
                "Choose a pack",
                _option("(a) a scholar's pack", "Scholar's Pack"),
                _option("(b) an explorer's pack", "Explorer's Pack"),
            ),
        ),
    ),
}

BACKGROUND_EQUIPMENT: Mapping[str, Sequence[EquipmentReference]] = {
    "acolyte": _refs("Holy Symbol", "Prayer Book", "Incense x5", "Vestments", "Common Clothes", "Pouch"),
    "criminal": _refs("Crowbar", "Common Clothes", "Pouch"),
    "folk hero": _refs("Shovel", "Iron Pot", "Common Clothes", "Pouch"),
    "sage": _refs("Ink", "Quill", "Small Knife", "Common Clothes", "Pouch"),
    "soldier": _refs("Insignia of Rank", "Dice Set", "Common Clothes", "Pouch"),
}

_SPELLCASTER_WEAPONS = ("daggers", "darts", "slings", "quarterstaffs", "light crossbows")
_FINESSE_SPECIALIST_WEAPONS = ("hand crossbows", "longswords", "rapiers", "shortswords")

CLASS_PROFICIENCIES: Mapping[str, Sequence[str]] = {
    "barbarian": ("light", "medium", "shields", "simple", "martial"),
    "bard": ("light", "simple", *_FINESSE_SPECIALIST_WEAPONS),
    "cleric": ("light", "medium", "shields", "simple"),
    "druid": (
        "light",
        "medium",
        "shields",
        "clubs",
        "daggers",
        "darts",
        "javelins",
        "maces",
        "quarterstaffs",
        "scimitars",
        "sickles",
        "slings",
        "spears",
    ),
    "fighter": ("light", "medium", "heavy", "shields", "simple", "martial"),
    "monk": ("simple", "shortswords"),
    "paladin": ("light", "medium", "heavy", "shields", "simple", "martial"),
    "ranger": ("light", "medium", "shields", "simple", "martial"),
    "rogue": ("light", "simple", *_FINESSE_SPECIALIST_WEAPONS),
    "sorcerer": _SPELLCASTER_WEAPONS,
    "warlock": ("light", "simple"),
    "wizard": _SPELLCASTER_WEAPONS,
}


def _key(value: str | None) -> str:
    return " ".join(str(value or "").strip().lower().replace("_", " ").split())


def class_display_name(class_name: str | None) -> str | None:
    """Canonical title-case name for a known class slug, else None."""
    key = _key(class_name)
    return key.title() if key in CLASS_STARTING_EQUIPMENT else None


def starting_equipment_for_class(class_name: str | None) -> StartingEquipment:
    return CLASS_STARTING_EQUIPMENT.get(_key(class_name), StartingEquipment())


def background_equipment_for(background_name: str | None) -> list[EquipmentReference]:
    return list(BACKGROUND_EQUIPMENT.get(_key(background_name), ()))


def proficiencies_for_class(class_name: str | None) -> list[str]:
    return list(CLASS_PROFICIENCIES.get(_key(class_name), ()))


def iter_authored_references():
    """Yield ``(source, reference)`` for every reference in the authored data."""

    for class_key, starting in CLASS_STARTING_EQUIPMENT.items():
        for reference in starting.fixed:
            yield f"class '{class_key}' fixed equipment", reference
        for choice_index, choice in enumerate(starting.choices):
            for option_index, option in enumerate(choice.options):
                for reference in option.references:
                    yield f"class '{class_key}' choice {choice_index} option {option_index}", reference
    for background_key, references in BACKGROUND_EQUIPMENT.items():
        for reference in references:
            yield f"background '{background_key}'", reference
