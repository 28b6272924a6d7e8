"""
Top‑level package for the Customer Management API.

All functionality lives in submodules under ``app``; import the
application as ``customer_management_api.app.main:app``.
"""

__all__ = []
