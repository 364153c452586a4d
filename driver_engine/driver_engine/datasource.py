"""Data source resolution on top of the driver registry.

Given the configured connection URL (plus optional explicit overrides) this
module decides which driver class, XA data source class and validation query
a data source should use.  Explicitly configured values always win over the
registry defaults.  Connection URLs are static configuration, so every
failure here is surfaced as a :class:`DataSourceConfigError` at startup.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from driver_engine.config import Settings
from driver_engine.drivers import (
    DatabaseDriver,
    DataSourceConfigError,
    InvalidDriverUrlError,
    resolve_by_url,
)

logger = logging.getLogger(__name__)


class ResolvedDataSource(BaseModel):
    """Fully-resolved connectivity settings for one data source."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        ...,
        min_length=1,
        description="Connection URL the data source was resolved from.",
    )
    driver: str = Field(
        ...,
        description="Registry key of the vendor the URL denotes (UNKNOWN if none).",
    )
    driver_class_name: str = Field(
        ...,
        min_length=1,
        description="Driver implementation to load.",
    )
    xa_data_source_class_name: str | None = Field(
        default=None,
        description="XA-capable data source implementation, if any.",
    )
    validation_query: str | None = Field(
        default=None,
        description="Health-check query, if the vendor has one.",
    )
    explicit_driver: bool = Field(
        default=False,
        description="Whether driver_class_name came from configuration rather than the registry.",
    )


def _driver_for(url: str | None) -> DatabaseDriver:
    try:
        return resolve_by_url(url)
    except InvalidDriverUrlError as exc:
        raise DataSourceConfigError(f"Invalid data source URL: {exc}") from exc


def determine_driver_class_name(url: str | None, configured: str | None = None) -> str:
    """Return the driver class name for *url*.

    *configured* wins when given.  Raises :class:`DataSourceConfigError` when
    the URL is malformed or its vendor has no known driver class.
    """
    if configured:
        return configured

    driver = _driver_for(url)
    if driver.driver_class_name is None:
        raise DataSourceConfigError(f"Unable to determine driver class name for URL {url!r}")
    return driver.driver_class_name


def determine_validation_query(url: str | None, configured: str | None = None) -> str | None:
    """Return the validation query for *url*, or ``None`` if the vendor has none."""
    if configured:
        return configured
    return _driver_for(url).validation_query


def resolve_datasource(settings: Settings) -> ResolvedDataSource:
    """Resolve the data source configured in *settings*.

    Raises
    ------
    DataSourceConfigError
        If no URL is configured, the URL is malformed, or no driver class
        can be determined for it.
    """
    url = settings.datasource_url
    if not url:
        raise DataSourceConfigError("No data source URL configured (set DRIVERS_DATASOURCE_URL)")

    driver = _driver_for(url)
    driver_class_name = determine_driver_class_name(url, settings.datasource_driver_class_name)
    xa_class_name = settings.datasource_xa_data_source_class_name or driver.xa_data_source_class_name

    resolved = ResolvedDataSource(
        url=url,
        driver=driver.key,
        driver_class_name=driver_class_name,
        xa_data_source_class_name=xa_class_name,
        validation_query=determine_validation_query(url, settings.datasource_validation_query),
        explicit_driver=settings.datasource_driver_class_name is not None,
    )

    logger.info(
        "Resolved data source driver %s (%s)",
        resolved.driver,
        resolved.driver_class_name,
        extra={"driver": resolved.driver},
    )
    return resolved
