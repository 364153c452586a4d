"""Driver registry shared types.

``DriverRecord`` is the immutable metadata bundle attached to every
:class:`~driver_engine.drivers.DatabaseDriver` member.  Nothing in here
loads a driver or touches a connection.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DriverRecord:
    """Connectivity identifiers for one database vendor.

    ``product_name_matcher`` is an optional extra predicate OR-ed after the
    default case-insensitive equality check on ``product_name``.  It is
    excluded from ``__eq__`` / ``__hash__`` so that two records compare on
    their data alone.
    """

    id: str
    product_name: str | None = None
    driver_class_name: str | None = None
    xa_data_source_class_name: str | None = None
    validation_query: str | None = None
    product_name_matcher: Callable[[str], bool] | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    def matches_product_name(self, product_name: str) -> bool:
        """Return ``True`` when *product_name* identifies this record."""
        if self.product_name is not None and self.product_name.casefold() == product_name.casefold():
            return True
        return self.product_name_matcher is not None and self.product_name_matcher(product_name)


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------


def starts_with(prefix: str) -> Callable[[str], bool]:
    """Build a case-insensitive "starts with *prefix*" predicate."""
    folded = prefix.casefold()

    def _match(product_name: str) -> bool:
        return product_name.casefold().startswith(folded)

    return _match


def contains(fragment: str) -> Callable[[str], bool]:
    """Build a case-insensitive "contains *fragment*" predicate."""
    folded = fragment.casefold()

    def _match(product_name: str) -> bool:
        return folded in product_name.casefold()

    return _match


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DriverRegistryError(Exception):
    """Base exception for all driver registry errors."""


class InvalidDriverUrlError(DriverRegistryError, ValueError):
    """A non-empty connection URL does not start with ``jdbc``."""


class DataSourceConfigError(DriverRegistryError):
    """A configured data source cannot be resolved to a usable driver."""
