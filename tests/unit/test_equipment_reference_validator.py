import io
import json
import sys
import tempfile
from contextlib import redirect_stdout
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from loadout.domain.models.equipment import EquipmentReference
from loadout.infrastructure.equipment_reference_validator import (
    find_unresolved_references,
    main,
    validate_equipment_file,
)
from loadout.infrastructure.inmemory.inmemory_equipment_catalog import InMemoryEquipmentCatalog
from loadout.infrastructure.srd_equipment_loader import DEFAULT_EQUIPMENT_DATA


class EquipmentReferenceValidatorTests(unittest.TestCase):
    def test_bundled_catalog_covers_all_authored_references(self) -> None:
        self.assertEqual([], validate_equipment_file(DEFAULT_EQUIPMENT_DATA))

    def test_unresolved_reference_is_reported_with_source(self) -> None:
        catalog = InMemoryEquipmentCatalog([{"kind": "gear", "name": "Torch"}])
        rows = [
            ("background 'test'", EquipmentReference(name="Torch")),
            ("background 'test'", EquipmentReference(name="Tourch", quantity=2)),
        ]

        errors = find_unresolved_references(catalog, rows)

        self.assertEqual(["background 'test': 'Tourch' is not in the equipment catalog"], errors)

    def test_missing_file_is_reported(self) -> None:
        errors = validate_equipment_file(Path("data/does_not_exist.json"))

        self.assertTrue(errors)
        self.assertIn("File not found", errors[0])

    def test_invalid_json_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "equipment.json"
            path.write_text("[{", encoding="utf-8")

            errors = validate_equipment_file(path)

        self.assertIn("Invalid JSON", errors[0])

    def test_main_exit_codes(self) -> None:
        with redirect_stdout(io.StringIO()) as output:
            self.assertEqual(0, main(["--path", str(DEFAULT_EQUIPMENT_DATA)]))
        self.assertIn("Equipment references valid.", output.getvalue())

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "equipment.json"
            path.write_text(json.dumps([{"kind": "gear", "name": "Torch"}]), encoding="utf-8")
            with redirect_stdout(io.StringIO()) as output:
                self.assertEqual(1, main(["--path", str(path)]))

        self.assertIn("Equipment references invalid", output.getvalue())
        self.assertIn("'Greataxe' is not in the equipment catalog", output.getvalue())


if __name__ == "__main__":
    unittest.main()
