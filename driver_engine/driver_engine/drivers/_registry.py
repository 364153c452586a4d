"""Database driver registry.

The enumeration below is the whole registry: one member per vendor, in a
fixed definition order that doubles as the lookup tie-break.  Both resolvers
are linear scans over ``DatabaseDriver`` and fall back to
``DatabaseDriver.UNKNOWN`` instead of raising when nothing matches.
"""

from __future__ import annotations

import enum
import logging

from ._types import DriverRecord, InvalidDriverUrlError, contains, starts_with

logger = logging.getLogger(__name__)

_URL_PREFIX = "jdbc"


class DatabaseDriver(enum.Enum):
    """Enumeration of common database drivers.

    The member name is the stable vendor key.  It is also the token looked
    up in connection URLs (``jdbc:<key>:...``), which is why it can differ
    from :attr:`id` (``DB2_AS400`` reports the ``db2`` id).
    """

    UNKNOWN = DriverRecord(id="unknown")

    DERBY = DriverRecord(
        id="derby",
        product_name="Apache Derby",
        driver_class_name="org.apache.derby.jdbc.EmbeddedDriver",
        xa_data_source_class_name="org.apache.derby.jdbc.EmbeddedXADataSource",
        validation_query="SELECT 1 FROM SYSIBM.SYSDUMMY1",
    )

    H2 = DriverRecord(
        id="h2",
        product_name="H2",
        driver_class_name="org.h2.Driver",
        xa_data_source_class_name="org.h2.jdbcx.JdbcDataSource",
        validation_query="SELECT 1",
    )

    HSQLDB = DriverRecord(
        id="hsqldb",
        product_name="HSQL Database Engine",
        driver_class_name="org.hsqldb.jdbc.JDBCDriver",
        xa_data_source_class_name="org.hsqldb.jdbc.pool.JDBCXADataSource",
        validation_query="SELECT COUNT(*) FROM INFORMATION_SCHEMA.SYSTEM_USERS",
    )

    SQLITE = DriverRecord(
        id="sqlite",
        product_name="SQLite",
        driver_class_name="org.sqlite.JDBC",
    )

    MYSQL = DriverRecord(
        id="mysql",
        product_name="MySQL",
        driver_class_name="com.mysql.jdbc.Driver",
        xa_data_source_class_name="com.mysql.jdbc.jdbc2.optional.MysqlXADataSource",
        validation_query="SELECT 1",
    )

    # MariaDB reports itself as MySQL, so MYSQL wins product name lookups.
    MARIADB = DriverRecord(
        id="mariadb",
        product_name="MySQL",
        driver_class_name="org.mariadb.jdbc.Driver",
        xa_data_source_class_name="org.mariadb.jdbc.MariaDbDataSource",
        validation_query="SELECT 1",
    )

    GAE = DriverRecord(
        id="gae",
        driver_class_name="com.google.appengine.api.rdbms.AppEngineDriver",
    )

    ORACLE = DriverRecord(
        id="oracle",
        product_name="Oracle",
        driver_class_name="oracle.jdbc.OracleDriver",
        xa_data_source_class_name="oracle.jdbc.xa.client.OracleXADataSource",
        validation_query="SELECT 'Hello' from DUAL",
    )

    POSTGRESQL = DriverRecord(
        id="postgresql",
        product_name="PostgreSQL",
        driver_class_name="org.postgresql.Driver",
        xa_data_source_class_name="org.postgresql.xa.PGXADataSource",
        validation_query="SELECT 1",
    )

    # jTDS fronts several databases; there is no single product name.
    JTDS = DriverRecord(
        id="jtds",
        driver_class_name="net.sourceforge.jtds.jdbc.Driver",
    )

    SQLSERVER = DriverRecord(
        id="sqlserver",
        product_name="SQL SERVER",
        driver_class_name="com.microsoft.sqlserver.jdbc.SQLServerDriver",
        xa_data_source_class_name="com.microsoft.sqlserver.jdbc.SQLServerXADataSource",
        validation_query="SELECT 1",
    )

    FIREBIRD = DriverRecord(
        id="firebird",
        product_name="Firebird",
        driver_class_name="org.firebirdsql.jdbc.FBDriver",
        xa_data_source_class_name="org.firebirdsql.pool.FBConnectionPoolDataSource",
        validation_query="SELECT 1 FROM RDB$DATABASE",
        product_name_matcher=starts_with("firebird"),
    )

    DB2 = DriverRecord(
        id="db2",
        product_name="DB2",
        driver_class_name="com.ibm.db2.jcc.DB2Driver",
        xa_data_source_class_name="com.ibm.db2.jcc.DB2XADataSource",
        validation_query="SELECT 1 FROM SYSIBM.SYSDUMMY1",
        product_name_matcher=starts_with("db2/"),
    )

    DB2_AS400 = DriverRecord(
        id="db2",
        product_name="DB2 UDB for AS/400",
        driver_class_name="com.ibm.as400.access.AS400JDBCDriver",
        xa_data_source_class_name="com.ibm.as400.access.AS400JDBCXADataSource",
        validation_query="SELECT 1 FROM SYSIBM.SYSDUMMY1",
        product_name_matcher=contains("as/400"),
    )

    TERADATA = DriverRecord(
        id="teradata",
        product_name="Teradata",
        driver_class_name="com.teradata.jdbc.TeraDriver",
    )

    INFORMIX = DriverRecord(
        id="informix",
        product_name="Informix Dynamic Server",
        driver_class_name="com.informix.jdbc.IfxDriver",
        validation_query="select count(*) from systables",
    )

    # -- accessors -----------------------------------------------------------

    @property
    def key(self) -> str:
        """Stable vendor key; also the token matched in connection URLs."""
        return self.name

    @property
    def record(self) -> DriverRecord:
        return self.value

    @property
    def id(self) -> str:
        """Short canonical identifier.  Not unique across members."""
        return self.value.id

    @property
    def product_name(self) -> str | None:
        return self.value.product_name

    @property
    def driver_class_name(self) -> str | None:
        """Return the driver class name, or ``None``."""
        return self.value.driver_class_name

    @property
    def xa_data_source_class_name(self) -> str | None:
        """Return the XA data source class name, or ``None``."""
        return self.value.xa_data_source_class_name

    @property
    def validation_query(self) -> str | None:
        """Return the validation query, or ``None``."""
        return self.value.validation_query

    @property
    def url_prefix(self) -> str:
        """The ``:<key>:`` token this driver is recognised by in a URL."""
        return f":{self.name.lower()}:"

    def match_product_name(self, product_name: str) -> bool:
        """Return ``True`` if *product_name* identifies this vendor."""
        return self.value.matches_product_name(product_name)

    # -- lookups ---------------------------------------------------------------

    @classmethod
    def from_jdbc_url(cls, url: str | None) -> DatabaseDriver:
        """Find the driver for *url*; see :func:`resolve_by_url`."""
        return resolve_by_url(url)

    @classmethod
    def from_product_name(cls, product_name: str | None) -> DatabaseDriver:
        """Find the driver for *product_name*; see :func:`resolve_by_product_name`."""
        return resolve_by_product_name(product_name)


def resolve_by_url(url: str | None) -> DatabaseDriver:
    """Find the :class:`DatabaseDriver` for a connection URL.

    Parameters
    ----------
    url:
        A ``jdbc:`` connection URL.  Empty or ``None`` yields ``UNKNOWN``.

    Returns
    -------
    DatabaseDriver
        The first member (in definition order) whose ``:<key>:`` token
        prefixes the URL after ``jdbc``, or ``DatabaseDriver.UNKNOWN``.

    Raises
    ------
    InvalidDriverUrlError
        If *url* is non-empty and does not start with ``jdbc``.
    """
    if not url:
        return DatabaseDriver.UNKNOWN
    if not url.startswith(_URL_PREFIX):
        raise InvalidDriverUrlError(f"URL must start with '{_URL_PREFIX}': {url!r}")

    remainder = url[len(_URL_PREFIX) :].lower()
    for driver in DatabaseDriver:
        if driver is not DatabaseDriver.UNKNOWN and remainder.startswith(driver.url_prefix):
            return driver

    logger.debug("No driver registered for URL %r", url)
    return DatabaseDriver.UNKNOWN


def resolve_by_product_name(product_name: str | None) -> DatabaseDriver:
    """Find the :class:`DatabaseDriver` for a vendor-reported product name.

    Returns ``DatabaseDriver.UNKNOWN`` for an empty name or when no member's
    matcher accepts it.
    """
    if not product_name:
        return DatabaseDriver.UNKNOWN

    for driver in DatabaseDriver:
        if driver.match_product_name(product_name):
            return driver

    logger.debug("No driver registered for product name %r", product_name)
    return DatabaseDriver.UNKNOWN
