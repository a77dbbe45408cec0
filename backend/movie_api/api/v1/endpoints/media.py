"""
Media API Endpoints
"""

from typing import Optional
from fastapi import APIRouter, Depends, File, Request, UploadFile

from movie_api.api.v1.deps import get_storage_service
from movie_api.models import BaseResponse, PosterUpload
from movie_api.services import StorageService

router = APIRouter()

@router.post("/posters", response_model=BaseResponse[PosterUpload], status_code=201)
async def upload_movie_poster(
    request: Request,
    image_file: Optional[UploadFile] = File(None),
    storage: StorageService = Depends(get_storage_service)
):
    """Upload a poster image; the returned URL can be used as a movie's cover_image"""

    filename = image_file.filename if image_file else None
    stored = await storage.save_poster(image_file, filename)

    return BaseResponse[PosterUpload](
        message="Uploaded successfully.",
        data=PosterUpload(
            url=str(request.url_for("static", path=stored.filename)),
            filename=stored.filename,
            file_size=stored.file_size,
            content_type=stored.content_type,
        ),
    )
