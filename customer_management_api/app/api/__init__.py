"""
API package containing the HTTP routes.

The package exposes a top‑level ``router`` in ``router.py`` which
includes all domain‑specific endpoints.
"""
