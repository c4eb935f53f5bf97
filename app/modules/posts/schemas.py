from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from app.modules.profiles.schemas import ProfileResponse


class PostCreate(BaseModel):
    content: str
    image_url: Optional[str] = None


class PostResponse(BaseModel):
    id: str
    user_id: str
    content: str
    image_url: Optional[str] = None
    created_at: datetime
    profile: Optional[ProfileResponse] = None
    like_count: int = 0
    comment_count: int = 0
    user_has_liked: bool = False

    class Config:
        from_attributes = True


class CommentCreate(BaseModel):
    content: str


class CommentResponse(BaseModel):
    id: str
    post_id: str
    user_id: str
    content: str
    created_at: Optional[datetime] = None
    profile: Optional[ProfileResponse] = None

    class Config:
        from_attributes = True
