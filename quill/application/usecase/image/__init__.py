"""Image use cases."""

from .delete_image import DeleteImageRequest, DeleteImageResponse, DeleteImageUseCase
from .list_images import (
    GetImageRequest,
    GetImageUseCase,
    ListImagesRequest,
    ListImagesResponse,
    ListImagesUseCase,
)
from .upload_image import UploadImageRequest, UploadImageUseCase

__all__ = [
    "DeleteImageRequest",
    "DeleteImageResponse",
    "DeleteImageUseCase",
    "GetImageRequest",
    "GetImageUseCase",
    "ListImagesRequest",
    "ListImagesResponse",
    "ListImagesUseCase",
    "UploadImageRequest",
    "UploadImageUseCase",
]
