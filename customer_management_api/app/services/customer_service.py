"""
Service layer for customers.

``CustomerService`` translates the four domain operations (list, get,
add, delete) into calls on the ``CustomerStore`` it was constructed
with.  A missing customer is reported as ``None``/``False`` rather than
an exception; only a missing create payload is treated as an error.
"""

import logging
from typing import List, Optional

from customer_management_api.app.core.db import CustomerStore
from customer_management_api.app.core.exceptions import InvalidArgumentError
from customer_management_api.app.schemas.customer import CustomerCreate, CustomerRead


class CustomerService:
    """Service class for managing customer records."""

    def __init__(self, store: CustomerStore) -> None:
        if store is None:
            raise InvalidArgumentError("store")
        self.store = store

    async def list_all(self) -> List[CustomerRead]:
        """Return all customers in store order.  Empty store yields ``[]``."""
        return self.store.list_all()

    async def get_by_id(self, customer_id: int) -> Optional[CustomerRead]:
        return self.store.get(customer_id)

    async def add(self, customer: Optional[CustomerCreate]) -> CustomerRead:
        """Insert a new customer and return the stored record.

        The store assigns ``id`` and ``created_at``.  Raises
        ``InvalidArgumentError`` when ``customer`` is ``None``.
        """
        if customer is None:
            raise InvalidArgumentError("customer", "Customer payload is required")
        created = self.store.insert(customer)
        logging.getLogger(__name__).info("Created customer %s", created.id)
        return created

    async def delete(self, customer_id: int) -> bool:
        """Delete a customer by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        deleted = self.store.delete(customer_id)
        if deleted:
            logging.getLogger(__name__).info("Deleted customer %s", customer_id)
        return deleted
