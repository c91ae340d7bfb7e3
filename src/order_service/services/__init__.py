"""
order_service.services

Service-layer package.

Responsibilities:
- Map each HTTP operation onto a fixed sequence of collaborator calls.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend only on `backends.base` protocols so tests can pass in-memory fakes.
