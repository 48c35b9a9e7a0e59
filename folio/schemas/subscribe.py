from typing import Optional

from pydantic import BaseModel


class SubscribeRequest(BaseModel):
    email: Optional[str] = None


class SubscribeResponse(BaseModel):
    error: str = ""
