import pytest
from fastapi.testclient import TestClient

from customer_management_api.app.core.db import InMemoryCustomerStore
from customer_management_api.app.main import create_app
from customer_management_api.app.services.customer_service import CustomerService


@pytest.fixture
def store():
    return InMemoryCustomerStore()


@pytest.fixture
def service(store):
    return CustomerService(store)


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as test_client:
        yield test_client
