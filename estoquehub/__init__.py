"""
EstoqueHub backend: inventory API with per-user product catalogs.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic, the SQL persistence layer and the static browser client.
"""
