"""Request/response bodies for the contacts endpoints."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ContactPayload(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = None
    number: Optional[str] = None


class ContactOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    number: Optional[str] = None
