from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from app.database import DataStore, get_database
from app.features.files.service import FileService

router = APIRouter(prefix="/uploads", tags=["Files"])


class UploadRequest(BaseModel):
    """Image to upload, as a base64 data URL."""

    data_url: str = Field(..., min_length=1)


class UploadResponse(BaseModel):
    url: str
    message: str


@router.post("", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_file(request: UploadRequest, store: DataStore = Depends(get_database)):
    """
    Upload an image.

    - **data_url**: `data:image/<type>;base64,<payload>` (JPG, PNG, WEBP or GIF, max 5MB)

    Returns:
        dict: URL of the stored image
    """
    url = await FileService(store).upload_file(request.data_url)
    return UploadResponse(url=url, message="File uploaded successfully")
