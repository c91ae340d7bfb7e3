"""
order_service.domain

Domain package.

Responsibilities:
- The immutable `Order` value and its encodings (store record, event body, receipt).
"""

# Package marker; import from submodules.
