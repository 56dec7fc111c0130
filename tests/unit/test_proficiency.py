import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from loadout.domain.models.equipment import Armor, Gear, Weapon
from loadout.domain.services.proficiency import can_use_equipment, weapon_proficiency_token
from loadout.domain.services.starting_equipment_catalog import proficiencies_for_class


CHAIN_MAIL = Armor(name="Chain Mail", category="heavy", base_ac=16, add_dex=False, strength_requirement=13)
LEATHER = Armor(name="Leather Armor", category="light", base_ac=11, add_dex=True)
SHIELD = Armor(name="Shield", category="shield", base_ac=2, add_dex=False)
DAGGER = Weapon(name="Dagger", category="simple", damage="1d4", damage_type="piercing")
LONGSWORD = Weapon(name="Longsword", category="martial", damage="1d8", damage_type="slashing")
LIGHT_CROSSBOW = Weapon(name="Crossbow, Light", category="simple", damage="1d8", damage_type="piercing")
HAND_CROSSBOW = Weapon(name="Crossbow, Hand", category="martial", damage="1d6", damage_type="piercing")
BACKPACK = Gear(name="Backpack", weight=5)

FIGHTER = ["light", "medium", "heavy", "shields", "simple", "martial"]
WIZARD = ["daggers", "darts", "slings", "quarterstaffs", "light crossbows"]


class WeaponTokenTests(unittest.TestCase):
    def test_plain_name_gets_trailing_s(self) -> None:
        self.assertEqual("daggers", weapon_proficiency_token("Dagger"))
        self.assertEqual("war picks", weapon_proficiency_token("War Pick"))

    def test_qualified_name_moves_qualifier_first(self) -> None:
        self.assertEqual("light crossbows", weapon_proficiency_token("Crossbow, Light"))
        self.assertEqual("hand crossbows", weapon_proficiency_token("Crossbow, Hand"))

    def test_irregular_plurals_are_not_special_cased(self) -> None:
        self.assertEqual("glasss", weapon_proficiency_token("Glass"))
        self.assertEqual("knifes", weapon_proficiency_token("Knife"))

    def test_only_first_separator_splits(self) -> None:
        self.assertEqual("light, repeating crossbows", weapon_proficiency_token("Crossbow, Light, Repeating"))


class CanUseEquipmentTests(unittest.TestCase):
    def test_gear_never_needs_proficiency(self) -> None:
        for tokens in ([], ["martial"], FIGHTER, WIZARD):
            with self.subTest(tokens=tokens):
                self.assertTrue(can_use_equipment(BACKPACK, tokens))
        self.assertTrue(can_use_equipment(BACKPACK, None))

    def test_armor_requires_matching_category(self) -> None:
        self.assertTrue(can_use_equipment(CHAIN_MAIL, FIGHTER))
        self.assertFalse(can_use_equipment(CHAIN_MAIL, WIZARD))
        self.assertFalse(can_use_equipment(CHAIN_MAIL, ["light", "medium"]))
        self.assertTrue(can_use_equipment(LEATHER, ["light"]))

    def test_shields_need_the_shields_token(self) -> None:
        self.assertTrue(can_use_equipment(SHIELD, ["shields"]))
        self.assertFalse(can_use_equipment(SHIELD, ["shield"]))
        self.assertFalse(can_use_equipment(SHIELD, ["light", "medium", "heavy"]))

    def test_weapon_category_token(self) -> None:
        self.assertTrue(can_use_equipment(LONGSWORD, FIGHTER))
        self.assertTrue(can_use_equipment(DAGGER, ["simple"]))
        self.assertFalse(can_use_equipment(LONGSWORD, ["simple"]))

    def test_specific_weapon_token(self) -> None:
        self.assertTrue(can_use_equipment(DAGGER, WIZARD))
        self.assertFalse(can_use_equipment(LONGSWORD, WIZARD))
        self.assertFalse(can_use_equipment(DAGGER, ["dagger"]))

    def test_qualified_crossbow_tokens_do_not_cross_match(self) -> None:
        self.assertTrue(can_use_equipment(LIGHT_CROSSBOW, ["light crossbows"]))
        self.assertFalse(can_use_equipment(HAND_CROSSBOW, ["light crossbows"]))

    def test_tokens_are_compared_case_insensitively(self) -> None:
        self.assertTrue(can_use_equipment(CHAIN_MAIL, ["Heavy"]))
        self.assertTrue(can_use_equipment(LIGHT_CROSSBOW, ["Light Crossbows"]))

    def test_empty_token_list_rejects_armor_and_weapons(self) -> None:
        for item in (CHAIN_MAIL, SHIELD, DAGGER, LONGSWORD):
            with self.subTest(item=item.name):
                self.assertFalse(can_use_equipment(item, []))

    def test_class_tokens_cover_signature_gear(self) -> None:
        rogue = proficiencies_for_class("Rogue")
        self.assertTrue(can_use_equipment(HAND_CROSSBOW, rogue))
        self.assertTrue(can_use_equipment(LEATHER, rogue))
        self.assertFalse(can_use_equipment(SHIELD, rogue))

    def test_unknown_variant_raises_type_error(self) -> None:
        with self.assertRaises(TypeError):
            can_use_equipment(object(), ["simple"])


if __name__ == "__main__":
    unittest.main()
