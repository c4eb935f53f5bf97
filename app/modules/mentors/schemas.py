from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class MentorCreate(BaseModel):
    expertise: List[str]
    languages: List[str]
    availability: str
    experience: str
    bio: str


class MentorResponse(BaseModel):
    id: str
    user_id: str
    expertise: List[str]
    languages: List[str]
    availability: str
    experience: str
    bio: str
    status: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
