"""
Abstract Factory — Database Connectivity.

Abstract factory:   DatabaseFactory
Abstract products:  DatabaseConnection, DatabaseCommand
Concrete factories: MySQLFactory, PostgreSQLFactory, OracleFactory
Concrete products:  MySQLConnection & MySQLCommand
                    PostgreSQLConnection & PostgreSQLCommand
                    OracleConnection & OracleCommand

No driver is involved: connections and commands only report what they
would do. Connections are context managers, so leaving a ``with`` block
releases them on every exit path.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_QUERY = "SELECT * FROM some_table"


class DatabaseVendor(Enum):
    """Supported database families."""
    MYSQL = "mysql"
    POSTGRES = "postgres"
    ORACLE = "oracle"


DEFAULT_VENDOR = DatabaseVendor.MYSQL

VENDOR_NAMES = {
    DatabaseVendor.MYSQL: "MySQL",
    DatabaseVendor.POSTGRES: "PostgreSQL",
    DatabaseVendor.ORACLE: "Oracle",
}


class ConnectionClosedError(RuntimeError):
    """Raised when a closed connection is used again."""


# =============================================================================
# ABSTRACT PRODUCTS
# =============================================================================

class DatabaseConnection(ABC):
    """A connection to one vendor's database."""

    vendor: DatabaseVendor

    def __init__(self) -> None:
        self.connected = False
        self.closed = False

    @property
    def vendor_name(self) -> str:
        return VENDOR_NAMES[self.vendor]

    def connect(self) -> str:
        """Open the connection and return the status line."""
        if self.closed:
            raise ConnectionClosedError(f"{type(self).__name__} is closed")
        message = self._handshake()
        self.connected = True
        print(message)
        return message

    @abstractmethod
    def _handshake(self) -> str:
        """Vendor-specific connect step."""

    def close(self) -> None:
        """Release the connection. Calling it twice is a no-op."""
        if self.closed:
            return
        self.connected = False
        self.closed = True
        logger.debug("%s closed", type(self).__name__)

    def __enter__(self) -> DatabaseConnection:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class DatabaseCommand:
    """A query executor for one vendor's dialect."""

    vendor: DatabaseVendor

    @property
    def vendor_name(self) -> str:
        return VENDOR_NAMES[self.vendor]

    def execute(self, query: str) -> str:
        """Run a query and return the status line."""
        message = f"{self.vendor_name} executing: {query}"
        print(message)
        return message


class DatabaseFactory(ABC):
    """Creates a connection and a command from the same family."""

    vendor: DatabaseVendor

    @abstractmethod
    def create_connection(self) -> DatabaseConnection:
        ...

    @abstractmethod
    def create_command(self) -> DatabaseCommand:
        ...


# =============================================================================
# MYSQL
# =============================================================================

class MySQLConnection(DatabaseConnection):
    vendor = DatabaseVendor.MYSQL

    def _handshake(self) -> str:
        return "Connecting to MySQL database..."


class MySQLCommand(DatabaseCommand):
    vendor = DatabaseVendor.MYSQL


class MySQLFactory(DatabaseFactory):
    vendor = DatabaseVendor.MYSQL

    def create_connection(self) -> DatabaseConnection:
        return MySQLConnection()

    def create_command(self) -> DatabaseCommand:
        return MySQLCommand()


# =============================================================================
# POSTGRESQL
# =============================================================================

class PostgreSQLConnection(DatabaseConnection):
    vendor = DatabaseVendor.POSTGRES

    def _handshake(self) -> str:
        return "Connecting to PostgreSQL database..."


class PostgreSQLCommand(DatabaseCommand):
    vendor = DatabaseVendor.POSTGRES


class PostgreSQLFactory(DatabaseFactory):
    vendor = DatabaseVendor.POSTGRES

    def create_connection(self) -> DatabaseConnection:
        return PostgreSQLConnection()

    def create_command(self) -> DatabaseCommand:
        return PostgreSQLCommand()


# =============================================================================
# ORACLE
# =============================================================================

class OracleConnection(DatabaseConnection):
    vendor = DatabaseVendor.ORACLE

    def _handshake(self) -> str:
        return "Connecting to Oracle database..."


class OracleCommand(DatabaseCommand):
    vendor = DatabaseVendor.ORACLE


class OracleFactory(DatabaseFactory):
    vendor = DatabaseVendor.ORACLE

    def create_connection(self) -> DatabaseConnection:
        return OracleConnection()

    def create_command(self) -> DatabaseCommand:
        return OracleCommand()


# =============================================================================
# FACTORY SELECTION
# =============================================================================

FACTORIES: dict[DatabaseVendor, type[DatabaseFactory]] = {
    DatabaseVendor.MYSQL: MySQLFactory,
    DatabaseVendor.POSTGRES: PostgreSQLFactory,
    DatabaseVendor.ORACLE: OracleFactory,
}


def get_database_factory(vendor: Union[DatabaseVendor, str, None] = None) -> DatabaseFactory:
    """
    Select the factory for a database vendor.

    Accepts a DatabaseVendor member or its string value. Unrecognised
    values fall through to MySQL without raising.
    """
    selected = _coerce_vendor(vendor)
    if selected is None:
        logger.debug("Unmatched database %r, using %s", vendor, DEFAULT_VENDOR.value)
        selected = DEFAULT_VENDOR

    factory = FACTORIES[selected]()
    logger.debug("Selected %s", type(factory).__name__)
    return factory


def _coerce_vendor(vendor: Union[DatabaseVendor, str, None]) -> Optional[DatabaseVendor]:
    if isinstance(vendor, DatabaseVendor):
        return vendor
    if isinstance(vendor, str):
        try:
            return DatabaseVendor(vendor.strip().lower())
        except ValueError:
            return None
    return None


# =============================================================================
# DEMO
# =============================================================================

def run_demo(
    vendor: Union[DatabaseVendor, str, None] = None,
    query: str = DEFAULT_QUERY,
) -> tuple[DatabaseConnection, DatabaseCommand]:
    """Connect, run one query, and release the connection."""
    factory = get_database_factory(vendor)

    command = factory.create_command()
    with factory.create_connection() as connection:
        connection.connect()
        command.execute(query)

    return connection, command
