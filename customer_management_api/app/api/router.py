"""
Top‑level API router.

Aggregates the domain routers under the ``/api`` prefix applied in
``main``.  When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import customers

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
