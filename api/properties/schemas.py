"""
Pydantic schemas for property endpoints.

Every field is optional here: presence and range rules live in the service so
that they produce the same error messages for create and update.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from core.validation import Amount


class PropertyRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    address: str | None = None
    listing_price: Optional[Amount] = Field(default=None, alias="listingPrice")
    rent: Optional[Amount] = None


class PropertyCreateRequest(PropertyRequest):
    pass


class PropertyUpdateRequest(PropertyRequest):
    """
    Partial update; unset fields are left unchanged.
    """
