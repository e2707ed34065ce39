"""Pydantic models for crash-reporter breadcrumbs.

Breadcrumb data is restricted to typed scalars so that payloads stay
serializable by any backend.
"""

from datetime import datetime, timezone
from typing import Dict, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator

BreadcrumbValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]


class Breadcrumb(BaseModel):
    """A diagnostic note forwarded to the crash reporter."""

    message: str = Field(..., description="Breadcrumb text")
    category: str = Field(default="log", description="Grouping category")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the breadcrumb was recorded (UTC)",
    )
    data: Dict[str, BreadcrumbValue] = Field(default_factory=dict)

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("message must not be blank")
        return v
