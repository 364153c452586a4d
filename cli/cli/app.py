"""Drivers CLI application -- Typer-based interface to the driver registry.

Provides commands for listing registered drivers, resolving a connection
URL or a reported product name, and resolving the configured data source.
Human-readable output goes to *stderr* via Rich; ``--json`` output goes to
*stdout* so that scripts can compose cleanly.

Exit codes: 0 on success, 1 when the lookup resolves to ``UNKNOWN``, 3 on
invalid input or configuration.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cli.display import (
    display_datasource,
    display_driver,
    display_driver_list,
    driver_to_dict,
)

if TYPE_CHECKING:
    from driver_engine.config import Settings

# ---------------------------------------------------------------------------
# App & global state
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="drivers",
    help="Database driver registry - resolve vendors from URLs and product names.",
    no_args_is_help=True,
)
console = Console(stderr=True)

# Mutable global options populated by the Typer callback.
_json_output: bool = False


# ---------------------------------------------------------------------------
# Callback -- global options
# ---------------------------------------------------------------------------


@app.callback()
def _global_options(
    json_mode: bool = typer.Option(
        False,
        "--json/--no-json",
        help="Emit structured JSON to stdout instead of human-readable output.",
    ),
) -> None:
    """Global options applied to every command."""
    from driver_engine.telemetry import configure_logging

    global _json_output  # noqa: PLW0603
    _json_output = json_mode
    configure_logging(_load_settings())


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_settings(**overrides: object) -> Settings:
    """Load settings, exiting with code 3 when a DRIVERS_* value is invalid."""
    from driver_engine.config import load_settings

    try:
        return load_settings(**overrides)
    except ValidationError as exc:
        console.print(f"[red]Invalid configuration: {escape(str(exc))}[/red]")
        raise typer.Exit(code=3) from exc


def _write_json(data: Any) -> None:
    sys.stdout.write(json.dumps(data, indent=2, sort_keys=True) + "\n")


def _report(driver: Any, query: str) -> None:
    """Print the resolved driver and exit 1 when it is ``UNKNOWN``."""
    from driver_engine.drivers import DatabaseDriver

    if _json_output:
        _write_json(driver_to_dict(driver))
    else:
        display_driver(console, driver, query)

    if driver is DatabaseDriver.UNKNOWN:
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@app.command("list")
def list_drivers(
    include_unknown: bool = typer.Option(
        False,
        "--include-unknown",
        help="Include the UNKNOWN fallback record.",
    ),
) -> None:
    """List every registered driver in lookup order."""
    from driver_engine.drivers import DatabaseDriver

    drivers = [d for d in DatabaseDriver if include_unknown or d is not DatabaseDriver.UNKNOWN]

    if _json_output:
        _write_json([driver_to_dict(d) for d in drivers])
    else:
        display_driver_list(console, drivers)


# ---------------------------------------------------------------------------
# url / product
# ---------------------------------------------------------------------------


@app.command()
def url(
    jdbc_url: str = typer.Argument(
        ...,
        help="Connection URL, e.g. jdbc:postgresql://localhost:5432/app.",
    ),
) -> None:
    """Resolve the driver for a connection URL."""
    from driver_engine.drivers import InvalidDriverUrlError, resolve_by_url

    try:
        driver = resolve_by_url(jdbc_url)
    except InvalidDriverUrlError as exc:
        console.print(f"[red]Invalid URL: {escape(str(exc))}[/red]")
        raise typer.Exit(code=3) from exc

    _report(driver, jdbc_url)


@app.command()
def product(
    product_name: str = typer.Argument(
        ...,
        help="Product name reported by the database, e.g. 'DB2/LINUXX8664'.",
    ),
) -> None:
    """Resolve the driver for a database product name."""
    from driver_engine.drivers import resolve_by_product_name

    _report(resolve_by_product_name(product_name), product_name)


# ---------------------------------------------------------------------------
# datasource
# ---------------------------------------------------------------------------


@app.command()
def datasource(
    datasource_url: str | None = typer.Option(
        None,
        "--url",
        help="Connection URL (overrides DRIVERS_DATASOURCE_URL).",
    ),
    driver_class_name: str | None = typer.Option(
        None,
        "--driver-class-name",
        help="Explicit driver class (overrides the registry default).",
    ),
    validation_query: str | None = typer.Option(
        None,
        "--validation-query",
        help="Explicit validation query (overrides the registry default).",
    ),
) -> None:
    """Resolve the configured data source's driver and validation query."""
    from driver_engine.datasource import resolve_datasource
    from driver_engine.drivers import DataSourceConfigError

    overrides: dict[str, object] = {}
    if datasource_url is not None:
        overrides["datasource_url"] = datasource_url
    if driver_class_name is not None:
        overrides["datasource_driver_class_name"] = driver_class_name
    if validation_query is not None:
        overrides["datasource_validation_query"] = validation_query

    try:
        resolved = resolve_datasource(_load_settings(**overrides))
    except DataSourceConfigError as exc:
        console.print(f"[red]Data source configuration error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=3) from exc

    if _json_output:
        _write_json(resolved.model_dump())
    else:
        display_datasource(console, resolved)
