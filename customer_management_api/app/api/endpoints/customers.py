"""
Customer endpoints.

These routes expose list, get, create and delete operations for
customer records.  Missing records are answered with an empty 404;
invalid or missing create payloads surface as a structured 400 through
the exception handlers installed in ``main``.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Request, Response, status

from customer_management_api.app.schemas.customer import CustomerCreate, CustomerRead
from customer_management_api.app.services.customer_service import CustomerService

router = APIRouter()


def get_customer_service(request: Request) -> CustomerService:
    """Build a ``CustomerService`` around the store owned by the application."""
    return CustomerService(request.app.state.store)


@router.get("", response_model=List[CustomerRead], response_model_exclude_none=True)
async def list_customers(
    service: CustomerService = Depends(get_customer_service),
) -> List[CustomerRead]:
    """Return all customers.  An empty store yields an empty list."""
    return await service.list_all()


@router.get("/{customer_id}", response_model=CustomerRead, response_model_exclude_none=True)
async def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
):
    """Retrieve a single customer by ID, or an empty 404."""
    customer = await service.get_by_id(customer_id)
    if customer is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return customer


@router.post(
    "",
    response_model=CustomerRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    request: Request,
    response: Response,
    customer_in: Optional[CustomerCreate] = Body(None),
    service: CustomerService = Depends(get_customer_service),
) -> CustomerRead:
    """Create a customer and point ``Location`` at its get-by-id URL."""
    customer = await service.add(customer_in)
    response.headers["Location"] = str(
        request.url_for("get_customer", customer_id=str(customer.id))
    )
    return customer


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """Delete a customer.  Answers 204 on success and an empty 404 otherwise."""
    deleted = await service.delete(customer_id)
    if not deleted:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
