from fastapi import UploadFile
from app.config import settings
from app.core.errors import ValidationFailed


async def read_upload(file: UploadFile) -> bytes:
    """Read an uploaded file, rejecting empty or oversized ones"""
    data = await file.read(settings.max_upload_bytes + 1)
    if not data:
        raise ValidationFailed("Uploaded file is empty")
    if len(data) > settings.max_upload_bytes:
        raise ValidationFailed(f"Uploaded file exceeds {settings.max_upload_bytes} bytes")
    return data
