from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel


class EntryCreate(BaseModel):
    token: Optional[str] = None
    payload: Any = None
    type: Optional[str] = None
    length: Any = None
    logged: Any = None
    message: Any = None


class EntryResponse(BaseModel):
    token: str
    created: datetime
    data: Any = None
    type: Optional[str] = None
    length: Any = None
    logged: Any = None
    message: Any = None
