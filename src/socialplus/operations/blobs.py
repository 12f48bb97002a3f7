"""
Binary endpoints: blobs and images.

Uploads send the raw bytes (or an async byte iterator) as the request body;
downloads return the raw bytes.
"""

from collections.abc import AsyncIterable
from typing import Union

from ..mapper import EnumType
from ..models import ImageType, PostBlobResponse, PostImageResponse
from .base import BINARY, OperationGroup, operation, path

Content = Union[bytes, bytearray, AsyncIterable[bytes]]

POST_BLOB = operation(
    "Blobs", "post_blob", "POST", "/blobs",
    "Upload a blob",
    response=PostBlobResponse,
    binary_body=True,
)
GET_BLOB = operation(
    "Blobs", "get_blob", "GET", "/blobs/{blobHandle}",
    "Get blob",
    parameters=(path("blobHandle"),),
    response=BINARY,
)
POST_IMAGE = operation(
    "Images", "post_image", "POST", "/images/{imageType}",
    "Upload a new image",
    parameters=(path("imageType", EnumType(ImageType)),),
    response=PostImageResponse,
    binary_body=True,
)
GET_IMAGE = operation(
    "Images", "get_image", "GET", "/images/{blobHandle}",
    "Get image",
    parameters=(path("blobHandle"),),
    response=BINARY,
    auth="optional",
)


class Blobs(OperationGroup):
    """Arbitrary binary blobs. Use Images for pictures."""

    async def post_blob(
        self,
        authorization: str,
        blob: Content,
        *,
        content_type: str = "application/octet-stream",
        custom_headers: dict[str, str] | None = None,
    ) -> PostBlobResponse:
        """Upload a blob."""
        return await self._call(
            POST_BLOB,
            content=blob,
            content_type=content_type,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_blob(
        self,
        blob_handle: str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> bytes:
        """Get blob."""
        return await self._call(
            GET_BLOB,
            params={"blobHandle": blob_handle},
            authorization=authorization,
            custom_headers=custom_headers,
        )


class Images(OperationGroup):
    """
    Images, resized by the service on upload.

    Append a size character to the returned blob handle to fetch a resized
    copy; see socialplus.images.resized_blob_handle().
    """

    async def post_image(
        self,
        image_type: ImageType | str,
        authorization: str,
        image: Content,
        *,
        content_type: str = "application/octet-stream",
        custom_headers: dict[str, str] | None = None,
    ) -> PostImageResponse:
        """Upload a new image."""
        return await self._call(
            POST_IMAGE,
            params={"imageType": image_type},
            content=image,
            content_type=content_type,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_image(
        self,
        blob_handle: str,
        *,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> bytes:
        """Get image (optionally a resized variant)."""
        return await self._call(
            GET_IMAGE,
            params={"blobHandle": blob_handle},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )
