#!/usr/bin/env python3
"""Customer Management API client.

This module defines a small client wrapper around the customer REST
endpoints and a console demo that exercises them:

* :meth:`CustomerApiClient.list_customers` – ``GET /api/customers``
* :meth:`CustomerApiClient.get_customer` – ``GET /api/customers/{id}``
* :meth:`CustomerApiClient.create_customer` – ``POST /api/customers``
* :meth:`CustomerApiClient.delete_customer` – ``DELETE /api/customers/{id}``

HTTP error statuses never raise: failed calls are logged and reported
as ``None`` (or ``False`` for deletes).  Transport failures such as a
refused connection propagate as ``requests.RequestException``.

Usage:
    python customer_client.py [BASE_URL]

The base URL defaults to the ``API_BASE_URL`` environment variable and
then to ``http://localhost:8000``.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
CUSTOMERS_PATH = "/api/customers"


class CustomerApiClient:
    """Client for the customer endpoints.

    Customers are exchanged as plain dictionaries with the API's
    camelCase keys (``id``, ``firstName``, ``lastName``, ``email``,
    ``createdAt``).
    """

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None):
        url = f"{self.base_url}{path}"
        logger.debug("Sending %s request to %s", method, url)
        return self.session.request(
            method=method,
            url=url,
            json=json_body,
            timeout=self.timeout,
        )

    @staticmethod
    def _log_failure(operation: str, response) -> None:
        message = response.text.strip() if response.content else ""
        logger.error("%s failed (%s) %s", operation, response.status_code, message)

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self) -> Optional[List[Dict[str, Any]]]:
        """Return all customers, or ``None`` if the call failed."""
        response = self._request("GET", CUSTOMERS_PATH)
        if response.status_code == 200:
            return response.json()
        self._log_failure("List customers", response)
        return None

    def get_customer(self, customer_id: int) -> Optional[Dict[str, Any]]:
        """Return a single customer, or ``None`` if it does not exist."""
        response = self._request("GET", f"{CUSTOMERS_PATH}/{customer_id}")
        if response.status_code == 200:
            return response.json()
        if response.status_code != 404:
            self._log_failure("Get customer", response)
        return None

    def create_customer(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Create a customer and return it with its assigned ``id`` and ``createdAt``."""
        payload = {"firstName": first_name, "lastName": last_name, "email": email}
        payload = {key: value for key, value in payload.items() if value is not None}
        response = self._request("POST", CUSTOMERS_PATH, json_body=payload)
        if response.status_code == 201:
            return response.json()
        self._log_failure("Create customer", response)
        return None

    def delete_customer(self, customer_id: int) -> bool:
        """Delete a customer.  Returns ``True`` only on ``204 No Content``."""
        response = self._request("DELETE", f"{CUSTOMERS_PATH}/{customer_id}")
        return response.status_code == 204


def format_customers(customers: Optional[List[Dict[str, Any]]]) -> str:
    """Render customers one per line for console output."""
    if not customers:
        return "(no customers)"
    lines = []
    for c in customers:
        lines.append(
            f"- [{c.get('id')}] {c.get('firstName') or ''} {c.get('lastName') or ''} "
            f"<{c.get('email') or ''}> createdAt={c.get('createdAt')}"
        )
    return "\n".join(lines)


def run_demo(client: CustomerApiClient) -> bool:
    """Create, list, fetch and delete a demo customer, printing each step.

    Returns ``False`` if the demo customer could not be created.
    """
    created = client.create_customer("Demo", "User", "demo.user@example.com")
    if created is None:
        return False
    print("Created customer:")
    print(json.dumps(created, indent=2))
    print()

    print("All customers after create:")
    print(format_customers(client.list_customers()))
    print()

    print(f"Get customer by id = {created['id']}")
    single = client.get_customer(created["id"])
    print(json.dumps(single, indent=2) if single is not None else "Not found")
    print()

    print(f"Deleting customer id = {created['id']}")
    print("Deleted" if client.delete_customer(created["id"]) else "Not found / failed")
    print()

    print("All customers after delete:")
    print(format_customers(client.list_customers()))
    return True


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Exercise the Customer Management API.")
    ap.add_argument(
        "base_url",
        nargs="?",
        default=os.getenv("API_BASE_URL", DEFAULT_BASE_URL),
        help="API base URL (default: $API_BASE_URL or %s)" % DEFAULT_BASE_URL,
    )
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    print(f"Using API base URL: {args.base_url}")
    print()

    client = CustomerApiClient(base_url=args.base_url)
    try:
        ok = run_demo(client)
    except requests.RequestException as exc:
        print(f"[!] Unexpected error: {exc}", file=sys.stderr)
        return 1
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
