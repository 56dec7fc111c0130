from pathlib import Path
import argparse
import logging
import sys
from typing import Sequence

from dotenv import load_dotenv

# Ensure the src directory is on sys.path when running as a script
_SRC_DIR = Path(__file__).resolve().parents[1]
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from loadout.bootstrap import configure_logging, create_loadout_service
from loadout.domain.models.stats import ability_scores_from_mapping
from loadout.presentation.loadout_sheet import render_loadout_sheet


logger = logging.getLogger("loadout")


def _parse_score(text: str) -> tuple[str, int]:
    name, sep, value = str(text).partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"Expected ABILITY=SCORE, got {text!r}")
    try:
        return name.strip(), int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Score must be an integer: {text!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="loadout", description="Show a character's starting equipment and Armor Class")
    parser.add_argument("--class", dest="class_name", required=True, help="Class name, e.g. fighter")
    parser.add_argument("--background", default="", help="Background name, e.g. soldier")
    parser.add_argument(
        "--select",
        nargs="*",
        type=int,
        default=[],
        help="Option index for each equipment choice, in order (missing entries pick option 0)",
    )
    parser.add_argument(
        "--score",
        action="append",
        type=_parse_score,
        default=[],
        help="Ability score as ABILITY=SCORE (e.g. dexterity=14 or DEX=14); repeatable",
    )
    parser.add_argument(
        "--proficiency",
        action="append",
        default=[],
        help="Extra proficiency token granted by race or feats; repeatable",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    configure_logging()
    args = build_parser().parse_args(list(argv) if argv is not None else None)

    try:
        service = create_loadout_service()
        view = service.build_loadout(
            args.class_name,
            args.background,
            args.select,
            ability_scores_from_mapping(dict(args.score)),
            args.proficiency,
        )
    except KeyboardInterrupt:
        print("\nSession ended.")
        return 130
    except Exception as exc:
        logger.debug("Loadout build failed", exc_info=True)
        print("Could not build the loadout.")
        print(f"Reason: {exc}")
        return 1

    render_loadout_sheet(view)
    return 1 if view.selection_errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
