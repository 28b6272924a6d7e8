"""
Customer storage backends.

Two stores implement the same small interface (``CustomerStore``):

* ``InMemoryCustomerStore`` keeps rows in a dictionary guarded by a
  lock.  It is the default and is what the tests use; every instance
  is an isolated database with its own identity counter.
* ``SqliteCustomerStore`` persists rows in a single ``customers`` table
  of an SQLite file.  A new connection is opened for every operation
  and closed before returning.

``create_store`` picks the implementation from ``Settings``.  The
store instance is created once per application and handed to the
service layer explicitly; there is no module level connection.
"""

import logging
import os
import sqlite3
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from .config import Settings, settings as default_settings
from ..schemas.customer import CustomerCreate, CustomerRead

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value; larger ids cannot be bound.
SQLITE_INTEGER_MIN = -(2 ** 63)
SQLITE_INTEGER_MAX = 2 ** 63 - 1


def _fits_sqlite_integer(value: int) -> bool:
    return SQLITE_INTEGER_MIN <= value <= SQLITE_INTEGER_MAX


class CustomerStore(ABC):
    """Persistence interface for customer records."""

    def init_schema(self) -> None:
        """Prepare the backing storage.  Called once at application startup."""

    @abstractmethod
    def list_all(self) -> List[CustomerRead]:
        """Return every stored customer in identity order."""

    @abstractmethod
    def get(self, customer_id: int) -> Optional[CustomerRead]:
        """Return the customer with ``customer_id`` or ``None``."""

    @abstractmethod
    def insert(self, data: CustomerCreate) -> CustomerRead:
        """Store a new customer, assigning its id and creation time."""

    @abstractmethod
    def delete(self, customer_id: int) -> bool:
        """Remove a customer.  Returns ``True`` if a row was removed."""


class InMemoryCustomerStore(CustomerStore):
    """Dictionary backed store.  Ids start at 1 and are never reused."""

    def __init__(self) -> None:
        self._rows: Dict[int, CustomerRead] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list_all(self) -> List[CustomerRead]:
        with self._lock:
            return [row.model_copy() for row in self._rows.values()]

    def get(self, customer_id: int) -> Optional[CustomerRead]:
        with self._lock:
            row = self._rows.get(customer_id)
            return row.model_copy() if row is not None else None

    def insert(self, data: CustomerCreate) -> CustomerRead:
        with self._lock:
            customer = CustomerRead(
                id=self._next_id,
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email,
                created_at=datetime.now(timezone.utc),
            )
            self._rows[customer.id] = customer
            self._next_id += 1
            return customer.model_copy()

    def delete(self, customer_id: int) -> bool:
        with self._lock:
            return self._rows.pop(customer_id, None) is not None


class SqliteCustomerStore(CustomerStore):
    """SQLite backed store.

    ``AUTOINCREMENT`` guarantees ids increase monotonically and are not
    reused after deletes.  ``created_at`` is stored as ISO‑8601 text with
    an explicit UTC offset.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def get_connection(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection with name based rows."""
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_schema(self) -> None:
        """Create the ``customers`` table if it does not exist."""
        conn = self.get_connection()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS customers (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    first_name TEXT,
                    last_name TEXT,
                    email TEXT,
                    created_at TEXT NOT NULL
                )
                """
            )
            conn.commit()
            logger.info("SQLite customer store ready at %s", self.path)
        finally:
            conn.close()

    def list_all(self) -> List[CustomerRead]:
        conn = self.get_connection()
        try:
            rows = conn.execute("SELECT * FROM customers ORDER BY id ASC").fetchall()
            return [self._row_to_customer(row) for row in rows]
        finally:
            conn.close()

    def get(self, customer_id: int) -> Optional[CustomerRead]:
        if not _fits_sqlite_integer(customer_id):
            return None
        conn = self.get_connection()
        try:
            row = conn.execute(
                "SELECT * FROM customers WHERE id = ?",
                (customer_id,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_customer(row)
        finally:
            conn.close()

    def insert(self, data: CustomerCreate) -> CustomerRead:
        created_at = datetime.now(timezone.utc)
        conn = self.get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO customers (first_name, last_name, email, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (data.first_name, data.last_name, data.email, created_at.isoformat()),
            )
            customer_id = cursor.lastrowid
            conn.commit()
            return CustomerRead(
                id=customer_id,
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email,
                created_at=created_at,
            )
        finally:
            conn.close()

    def delete(self, customer_id: int) -> bool:
        if not _fits_sqlite_integer(customer_id):
            return False
        conn = self.get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM customers WHERE id = ?", (customer_id,))
            affected = cursor.rowcount
            conn.commit()
            return affected > 0
        finally:
            conn.close()

    @staticmethod
    def _row_to_customer(row: sqlite3.Row) -> CustomerRead:
        """Convert a database row to a CustomerRead schema instance."""
        return CustomerRead(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )


def get_database_path(db_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used as is; relative paths are resolved against
    the project root.
    """
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # customer_management_api/
    return str((base_dir / db_url).resolve())


def create_store(config: Optional[Settings] = None) -> CustomerStore:
    """Build the store selected by ``config.database_provider``."""
    config = config or default_settings
    provider = config.database_provider.strip().lower()
    if provider == "sqlite":
        return SqliteCustomerStore(get_database_path(config.database_url))
    if provider != "inmemory":
        logger.warning("Unknown database provider %r; using the in-memory store", config.database_provider)
    return InMemoryCustomerStore()
