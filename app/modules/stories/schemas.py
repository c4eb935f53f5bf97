from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from app.modules.profiles.schemas import ProfileResponse


class StoryCreate(BaseModel):
    media_url: str


class StoryResponse(BaseModel):
    id: str
    user_id: str
    media_url: str
    created_at: datetime
    expires_at: datetime
    profile: Optional[ProfileResponse] = None

    class Config:
        from_attributes = True
