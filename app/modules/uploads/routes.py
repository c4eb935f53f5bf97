from fastapi import APIRouter, Depends, File, UploadFile
from app.core.dependencies import get_backend
from app.core.schemas import UploadResponse
from app.database.supabase_client import BackendClient
from app.modules.uploads.service import read_upload

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.post("/{bucket}", response_model=UploadResponse, status_code=201)
async def upload_file(
    bucket: str,
    file: UploadFile = File(...),
    backend: BackendClient = Depends(get_backend)
):
    """Upload a file to one of the public buckets (avatars, posts, stories, groups)"""
    data = await read_upload(file)
    url = backend.upload_blob(bucket, file.filename or "", data, file.content_type)
    return UploadResponse(url=url)
