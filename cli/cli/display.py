"""Rich output formatting for the drivers CLI.

All functions write to a :class:`rich.console.Console` instance (typically
bound to *stderr*) so that machine-readable output on *stdout* is never
polluted with human-readable decoration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from driver_engine.datasource import ResolvedDataSource
    from driver_engine.drivers import DatabaseDriver


def _or_dash(value: str | None) -> str:
    return escape(value) if value else "-"


def driver_to_dict(driver: DatabaseDriver) -> dict[str, Any]:
    """Return a JSON-serialisable view of *driver*."""
    return {
        "key": driver.key,
        "id": driver.id,
        "product_name": driver.product_name,
        "driver_class_name": driver.driver_class_name,
        "xa_data_source_class_name": driver.xa_data_source_class_name,
        "validation_query": driver.validation_query,
    }


# ---------------------------------------------------------------------------
# Driver table
# ---------------------------------------------------------------------------


def display_driver_list(console: Console, drivers: list[DatabaseDriver]) -> None:
    """Render a table of registered drivers.

    Parameters
    ----------
    console:
        Rich console to write to.
    drivers:
        Drivers to list, in registry order.
    """
    if not drivers:
        console.print("[dim]No drivers registered.[/dim]")
        return

    table = Table(
        title=f"Drivers ({len(drivers)})",
        show_lines=False,
        pad_edge=True,
        expand=False,
    )
    table.add_column("Key", style="bold")
    table.add_column("ID")
    table.add_column("Product Name")
    table.add_column("Driver Class")
    table.add_column("XA")
    table.add_column("Validation Query")

    for d in drivers:
        table.add_row(
            d.key,
            d.id,
            _or_dash(d.product_name),
            _or_dash(d.driver_class_name),
            "[green]yes[/green]" if d.xa_data_source_class_name else "[dim]no[/dim]",
            _or_dash(d.validation_query),
        )

    console.print(table)


# ---------------------------------------------------------------------------
# Single driver
# ---------------------------------------------------------------------------


def display_driver(console: Console, driver: DatabaseDriver, query: str) -> None:
    """Render the driver a URL or product name resolved to."""
    from driver_engine.drivers import DatabaseDriver

    if driver is DatabaseDriver.UNKNOWN:
        console.print(f"[yellow]No registered driver matches '{escape(query)}'.[/yellow]")
        return

    lines = [
        f"[bold]Key:[/bold]              {driver.key}",
        f"[bold]ID:[/bold]               {driver.id}",
        f"[bold]Product:[/bold]          {_or_dash(driver.product_name)}",
        f"[bold]Driver class:[/bold]     {_or_dash(driver.driver_class_name)}",
        f"[bold]XA data source:[/bold]   {_or_dash(driver.xa_data_source_class_name)}",
        f"[bold]Validation query:[/bold] {_or_dash(driver.validation_query)}",
    ]
    console.print(Panel("\n".join(lines), title=escape(query), border_style="blue"))


def display_datasource(console: Console, resolved: ResolvedDataSource) -> None:
    """Render a resolved data source."""
    source = "configured" if resolved.explicit_driver else "registry"
    lines = [
        f"[bold]URL:[/bold]              {escape(resolved.url)}",
        f"[bold]Vendor:[/bold]           {resolved.driver}",
        f"[bold]Driver class:[/bold]     {escape(resolved.driver_class_name)} [dim]({source})[/dim]",
        f"[bold]XA data source:[/bold]   {_or_dash(resolved.xa_data_source_class_name)}",
        f"[bold]Validation query:[/bold] {_or_dash(resolved.validation_query)}",
    ]
    console.print(Panel("\n".join(lines), title="Data Source", border_style="green"))
