"""
API layer for the Device Service.

Exposes HTTP endpoints under /api/v1/devices for creating, querying,
updating and deleting devices.
"""
