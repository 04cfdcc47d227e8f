"""
Device Service Application: root package.

This package contains the FastAPI app entry point (main.py), API routes,
the device domain (entity, state machine, repository interface), use cases,
and infrastructure (MongoDB and in-memory repositories).
"""
