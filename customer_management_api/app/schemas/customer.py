"""
Pydantic schemas for customer records.

A customer carries three optional text fields and two values assigned
by the store on creation: the integer ``id`` and the UTC ``created_at``
timestamp.  Payloads use camelCase on the wire (``firstName``,
``createdAt``); Python code uses the snake_case attribute names.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CustomerCreate(BaseModel):
    """Schema for creating a new customer.

    All fields are optional.  No validation beyond type checks is
    performed; empty strings are stored as given.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: Optional[str] = Field(None, description="Customer's first name")
    last_name: Optional[str] = Field(None, description="Customer's last name")
    email: Optional[str] = Field(None, description="Contact e-mail address")


class CustomerRead(BaseModel):
    """Schema for reading a stored customer."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime
