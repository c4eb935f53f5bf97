from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from app.modules.profiles.schemas import ProfileResponse


class GroupCreate(BaseModel):
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    cover_image_url: Optional[str] = None


class GroupResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    cover_image_url: Optional[str] = None
    created_by: str
    created_at: datetime
    member_count: int = 0
    is_member: bool = False

    class Config:
        from_attributes = True


class GroupMemberResponse(BaseModel):
    group_id: str
    user_id: str
    created_at: Optional[datetime] = None
    profile: Optional[ProfileResponse] = None

    class Config:
        from_attributes = True
