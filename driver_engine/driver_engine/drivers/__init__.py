"""Database driver registry -- vendor metadata keyed by URL and product name.

Usage::

    from driver_engine.drivers import DatabaseDriver, resolve_by_url

    driver = resolve_by_url("jdbc:postgresql://localhost:5432/app")
    driver.driver_class_name   # "org.postgresql.Driver"
    driver.validation_query    # "SELECT 1"

    DatabaseDriver.from_product_name("DB2/LINUXX8664")  # DatabaseDriver.DB2

Lookups never raise for an unrecognised vendor; callers compare against
``DatabaseDriver.UNKNOWN`` instead.
"""

from ._registry import DatabaseDriver, resolve_by_product_name, resolve_by_url
from ._types import (
    DataSourceConfigError,
    DriverRecord,
    DriverRegistryError,
    InvalidDriverUrlError,
)

__all__ = [
    # Registry
    "DatabaseDriver",
    "resolve_by_url",
    "resolve_by_product_name",
    # Types
    "DriverRecord",
    # Exceptions
    "DriverRegistryError",
    "InvalidDriverUrlError",
    "DataSourceConfigError",
]
