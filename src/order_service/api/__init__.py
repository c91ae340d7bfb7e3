"""
order_service.api

API package for the Order Service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and request/response models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: request parsing + delegation to `OrderService`.
