"""
Pydantic schemas for tenant endpoints.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from core.schema import MAX_SQLITE_INTEGER
from core.validation import Amount


class TenantRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    rent_due: Optional[Amount] = Field(default=None, alias="rentDue")
    property_id: int | None = Field(default=None, alias="propertyId", strict=True, le=MAX_SQLITE_INTEGER)


class TenantCreateRequest(TenantRequest):
    pass


class TenantUpdateRequest(TenantRequest):
    """
    Partial update; unset fields are left unchanged.
    """
