"""
order_service.api.schemas

Shared base for request/response models.

Responsibilities:
- camelCase wire names for every model.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
