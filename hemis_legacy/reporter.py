"""Rich tables for the registered entities and their wire layout."""

from __future__ import annotations

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from hemis_legacy.adapter.descriptors import describe
from hemis_legacy.registry import available_entities, resolve_entity


def build_entities_table(names: Optional[List[str]] = None) -> Table:
    """Table of registered CUBA entity names and their record types."""
    table = Table(title="Registered CUBA entities", box=box.ROUNDED)
    table.add_column("Entity", style="cyan", no_wrap=True)
    table.add_column("Record type", style="magenta")
    table.add_column("Fields", justify="right", style="green")
    table.add_column("Computed", justify="right", style="yellow")

    for name in names if names is not None else available_entities():
        descriptor = describe(resolve_entity(name))
        table.add_row(
            name,
            descriptor.record_type.__name__,
            str(len(descriptor.fields)),
            str(len(descriptor.computed)),
        )
    return table


def build_descriptor_table(entity: str) -> Table:
    """
    Render the descriptor table of an entity's record type.

    One row per stored field (declaration order) followed by the computed
    fields, showing how each is named on the wire and whether `_local` keeps it.
    """
    record_type = resolve_entity(entity)
    descriptor = describe(record_type)

    table = Table(
        title=f"{entity} ({record_type.__name__})",
        box=box.ROUNDED,
        caption="Computed fields are emitted in the default view only",
    )
    table.add_column("Wire key", style="cyan", no_wrap=True)
    table.add_column("Attribute", style="magenta")
    table.add_column("Kind", style="green")
    table.add_column("_local", justify="center", style="yellow")
    table.add_column("Computed", justify="center", style="red")

    for field in descriptor.fields + descriptor.computed:
        table.add_row(
            field.wire_key,
            field.attribute,
            field.kind.value,
            "yes" if field.local else "no",
            "yes" if field.computed else "",
        )
    return table


def print_table(table: Table, console: Optional[Console] = None) -> None:
    (console or Console()).print(table)


__all__ = ["build_descriptor_table", "build_entities_table", "print_table"]
