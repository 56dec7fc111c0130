"""Check that authored starting equipment only names catalogued items.

Usage examples:
    python -m loadout.infrastructure.equipment_reference_validator
    python -m loadout.infrastructure.equipment_reference_validator --path data/equipment.json
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Sequence

from loadout.domain.repositories import EquipmentCatalog
from loadout.domain.services.starting_equipment_catalog import iter_authored_references
from loadout.infrastructure.inmemory.inmemory_equipment_catalog import InMemoryEquipmentCatalog
from loadout.infrastructure.srd_equipment_loader import DEFAULT_EQUIPMENT_DATA, load_equipment_records


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate that class and background equipment resolves against the catalog")
    parser.add_argument(
        "--path",
        default=str(DEFAULT_EQUIPMENT_DATA),
        help="Path to equipment catalog JSON file",
    )
    return parser


def find_unresolved_references(catalog: EquipmentCatalog, references=None) -> list[str]:
    rows = iter_authored_references() if references is None else references
    errors: list[str] = []
    for source, reference in rows:
        if catalog.get_by_name(reference.name) is None:
            errors.append(f"{source}: '{reference.name}' is not in the equipment catalog")
    return errors


def validate_equipment_file(path: str | Path) -> list[str]:
    source = Path(path)
    if not source.exists():
        return [f"File not found: {source}"]

    try:
        records = load_equipment_records(source)
    except json.JSONDecodeError as exc:
        return [f"Invalid JSON: {exc}"]

    return find_unresolved_references(InMemoryEquipmentCatalog(records))


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    errors = validate_equipment_file(args.path)
    if errors:
        print(f"Equipment references invalid ({len(errors)} errors):")
        for message in errors:
            print(f"- {message}")
        return 1

    print("Equipment references valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
