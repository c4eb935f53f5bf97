from pydantic import BaseModel


class RelationToggleResponse(BaseModel):
    """Result of a like/join/attend: created is False when the actor was already linked."""
    created: bool


class UploadResponse(BaseModel):
    url: str
