"""Image upload routes."""

import logging
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.security import HTTPAuthorizationCredentials

from quill.application.usecase.article import ImageResponse
from quill.application.usecase.image import (
    DeleteImageRequest,
    DeleteImageResponse,
    DeleteImageUseCase,
    GetImageRequest,
    GetImageUseCase,
    ListImagesRequest,
    ListImagesResponse,
    ListImagesUseCase,
    UploadImageRequest,
    UploadImageUseCase,
)
from quill.config import UploadSettings
from quill.domain.service import JWTService
from quill.interface.api.security import bearer_scheme, require_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/images", tags=["images"], route_class=DishkaRoute)


@router.post(
    "/upload", response_model=ImageResponse, status_code=status.HTTP_201_CREATED
)
async def upload_image(
    jwt_service: FromDishka[JWTService],
    upload_settings: FromDishka[UploadSettings],
    upload_image_use_case: FromDishka[UploadImageUseCase],
    file: UploadFile = File(...),
    article_id: UUID = Form(...),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ImageResponse:
    """Attach an image to an article.

    Multipart form with ``file`` and ``article_id``. Requires authentication
    and ownership of the article.

    Raises:
        ValidationError: If the type is not allowed or the file is too large (400)
        NotFoundError: If the article does not exist (404)
        NotAuthorizedError: If the caller does not own the article (403)
    """
    user_id = require_user_id(jwt_service, credentials)

    # One byte past the limit is enough for the size check to reject it
    data = await file.read(upload_settings.max_size_bytes + 1)
    logger.info(
        f"Image upload: {file.filename} ({file.content_type}) for article {article_id}"
    )

    return await upload_image_use_case.execute(
        UploadImageRequest(
            article_id=str(article_id),
            user_id=user_id,
            filename=file.filename or "upload",
            mimetype=file.content_type or "application/octet-stream",
            data=data,
        )
    )


@router.get("", response_model=ListImagesResponse)
async def list_images(
    list_images_use_case: FromDishka[ListImagesUseCase],
    article_id: UUID | None = Query(default=None),
) -> ListImagesResponse:
    """List images, optionally only those of one article."""
    return await list_images_use_case.execute(
        ListImagesRequest(article_id=str(article_id) if article_id else None)
    )


@router.get("/{image_id}", response_model=ImageResponse)
async def get_image(
    image_id: UUID,
    get_image_use_case: FromDishka[GetImageUseCase],
) -> ImageResponse:
    """Get image metadata."""
    return await get_image_use_case.execute(GetImageRequest(image_id=str(image_id)))


@router.delete("/{image_id}", response_model=DeleteImageResponse)
async def delete_image(
    image_id: UUID,
    jwt_service: FromDishka[JWTService],
    delete_image_use_case: FromDishka[DeleteImageUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteImageResponse:
    """Delete an image and its file. Only the article's author may do this."""
    user_id = require_user_id(jwt_service, credentials)
    return await delete_image_use_case.execute(
        DeleteImageRequest(image_id=str(image_id), user_id=user_id)
    )
