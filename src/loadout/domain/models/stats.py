from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Any


def ability_modifier(score: int | None) -> int:
    try:
        return (int(score) - 10) // 2
    except Exception:
        return 0


@dataclass(frozen=True)
class AbilityScores:
    strength: int = 10
    dexterity: int = 10
    constitution: int = 10
    intelligence: int = 10
    wisdom: int = 10
    charisma: int = 10

    @property
    def dexterity_mod(self) -> int:
        return ability_modifier(self.dexterity)

    @property
    def constitution_mod(self) -> int:
        return ability_modifier(self.constitution)

    @property
    def wisdom_mod(self) -> int:
        return ability_modifier(self.wisdom)


def ability_scores_from_mapping(attributes: Mapping[str, Any] | None) -> AbilityScores:
    """Read six scores from full names or the STR/DEX/... abbreviations.

    Missing or unreadable values fall back to 10, which yields a +0 modifier.
    """

    attrs = {str(key).strip().lower(): value for key, value in (attributes or {}).items()}

    def _score(primary: str, abbreviation: str) -> int:
        raw = attrs.get(primary)
        if raw is None:
            raw = attrs.get(abbreviation)
        try:
            return int(raw) if raw is not None else 10
        except Exception:
            return 10

    return AbilityScores(
        strength=_score("strength", "str"),
        dexterity=_score("dexterity", "dex"),
        constitution=_score("constitution", "con"),
        intelligence=_score("intelligence", "int"),
        wisdom=_score("wisdom", "wis"),
        charisma=_score("charisma", "cha"),
    )
