from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TokenResponse(BaseModel):
    token: str = Field(pattern=r"^[0-9a-f]{32}$")
    created: datetime
    changed: datetime
    expire: Optional[datetime] = None
    description: Optional[str] = None


class TokenUpdate(BaseModel):
    token: Optional[str] = None
    description: Optional[str] = None
    expire: Optional[datetime] = None

    @field_validator("token", "description", "expire", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if value == "":
            return None
        return value

    def changes(self) -> dict:
        """Fields an update may touch, limited to those that were supplied."""
        values = {}
        if self.description is not None:
            values["description"] = self.description
        if self.expire is not None:
            values["expire"] = self.expire
        return values
