"""
order_service.backends

External collaborator package.

Responsibilities:
- Define the key-value store, blob store and message queue interfaces.
- Provide AWS implementations (DynamoDB, S3, SQS) over aiobotocore.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The service layer depends on `backends.base` only; AWS specifics stay in `aws`/`session`.
