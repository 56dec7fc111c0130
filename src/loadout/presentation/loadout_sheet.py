from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table

from loadout.application.dtos import LoadoutView


_BORDER_SHEET = "yellow"
_BORDER_WARNINGS = "red"


def _quantity_label(quantity: int) -> str:
    return f"x{quantity}" if quantity > 1 else ""


def build_summary_grid(view: LoadoutView) -> Table:
    header = Table.grid(padding=(0, 1))
    header.add_column(style="bold yellow", justify="right")
    header.add_column(style="white")
    header.add_row("Class", view.class_name.title() or "-")
    header.add_row("Background", view.background_name.title() or "-")
    header.add_row("Armor Class", str(view.armour_class))
    header.add_row(
        "Carried",
        ", ".join(f"{count} {kind}" for kind, count in view.counts_by_kind.items()),
    )
    header.add_row("Weight", f"{view.total_weight:g} lb")
    return header


def build_item_table(view: LoadoutView) -> Table:
    table = Table(show_header=True, header_style="bold yellow")
    table.add_column("Item")
    table.add_column("Qty", justify="right")
    table.add_column("Kind")
    table.add_column("Category")
    table.add_column("Detail")
    table.add_column("Proficient", justify="center")
    for row in view.items:
        table.add_row(
            row.name,
            _quantity_label(row.quantity),
            row.kind,
            row.category,
            row.detail,
            "yes" if row.proficient else "[red]no[/red]",
        )
    return table


def build_choice_table(view: LoadoutView) -> Table:
    table = Table(show_header=True, header_style="bold yellow")
    table.add_column("#", justify="right")
    table.add_column("Choice")
    table.add_column("Selected")
    for index, choice in enumerate(view.choices):
        if 0 <= choice.selected_index < len(choice.option_labels):
            selected = choice.option_labels[choice.selected_index]
        else:
            selected = "[red]nothing (invalid selection)[/red]"
        table.add_row(str(index), choice.description, selected)
    return table


def render_loadout_sheet(view: LoadoutView, console: Console | None = None) -> None:
    console = console or Console()
    parts = [build_summary_grid(view)]
    if view.choices:
        parts.append(build_choice_table(view))
    parts.append(build_item_table(view))
    console.print(Panel(Group(*parts), title="[bold yellow]Starting Loadout[/bold yellow]", border_style=_BORDER_SHEET))

    if view.selection_errors:
        console.print(
            Panel.fit(
                "\n".join(f"- {message}" for message in view.selection_errors),
                title="[bold red]Selection Problems[/bold red]",
                border_style=_BORDER_WARNINGS,
            )
        )
