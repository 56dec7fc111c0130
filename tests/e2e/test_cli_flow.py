import io
import sys
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from rich.console import Console

from loadout import __main__ as cli
from loadout.application.dtos import EquipmentChoiceView, LoadoutItemView, LoadoutView
from loadout.presentation.loadout_sheet import render_loadout_sheet


class CliFlowTests(unittest.TestCase):
    def test_fighter_sheet_renders_items_and_armour_class(self) -> None:
        with mock.patch("sys.stdout", new_callable=io.StringIO) as output:
            exit_code = cli.main(["--class", "fighter", "--background", "soldier", "--select", "0", "0", "--score", "DEX=14"])

        transcript = output.getvalue()
        self.assertEqual(0, exit_code)
        self.assertIn("Starting Loadout", transcript)
        self.assertIn("Chain Mail", transcript)
        self.assertIn("Insignia of Rank", transcript)
        self.assertIn("18", transcript)

    def test_invalid_selection_returns_non_zero_and_lists_problem(self) -> None:
        with mock.patch("sys.stdout", new_callable=io.StringIO) as output:
            exit_code = cli.main(["--class", "wizard", "--select", "4"])

        self.assertEqual(1, exit_code)
        self.assertIn("Selection Problems", output.getvalue())

    def test_score_arguments_reach_the_service(self) -> None:
        with mock.patch("loadout.__main__.render_loadout_sheet") as render:
            cli.main(["--class", "monk", "--score", "dexterity=16", "--score", "WIS=16"])

        view = render.call_args.args[0]
        self.assertEqual(16, view.armour_class)

    def test_catalog_errors_are_reported_without_traceback(self) -> None:
        with mock.patch.dict("os.environ", {"LOADOUT_EQUIPMENT_DATA": "missing/equipment.json"}), mock.patch(
            "sys.stdout", new_callable=io.StringIO
        ) as output:
            exit_code = cli.main(["--class", "fighter"])

        self.assertEqual(1, exit_code)
        self.assertIn("Could not build the loadout.", output.getvalue())
        self.assertIn("Equipment dataset not found", output.getvalue())

    def test_malformed_score_is_rejected_by_argparse(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO), self.assertRaises(SystemExit):
            cli.main(["--class", "fighter", "--score", "dexterity"])


class LoadoutSheetRenderTests(unittest.TestCase):
    def test_render_marks_non_proficient_items(self) -> None:
        view = LoadoutView(
            class_name="wizard",
            background_name="",
            armour_class=12,
            items=[
                LoadoutItemView(
                    name="Chain Mail",
                    kind="armor",
                    category="heavy",
                    detail="AC 16",
                    quantity=1,
                    weight=55.0,
                    proficient=False,
                ),
                LoadoutItemView(name="Arrow", kind="gear", category="gear", detail="", quantity=20, weight=0.05, proficient=True),
            ],
            counts_by_kind={"weapon": 0, "armor": 1, "gear": 1},
            choices=[EquipmentChoiceView(description="Choose a weapon", option_labels=["(a) a quarterstaff"], selected_index=3)],
            total_weight=56.0,
        )
        console = Console(file=io.StringIO(), width=160, color_system=None)

        render_loadout_sheet(view, console=console)

        transcript = console.file.getvalue()
        self.assertIn("Wizard", transcript)
        self.assertIn("x20", transcript)
        self.assertIn("no", transcript)
        self.assertIn("nothing (invalid selection)", transcript)
        self.assertIn("56 lb", transcript)


if __name__ == "__main__":
    unittest.main()
