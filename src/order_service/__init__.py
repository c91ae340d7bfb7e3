"""
order_service

Top-level package for the Order Service demo.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal; the AWS client stack is only imported by `backends.session`.
