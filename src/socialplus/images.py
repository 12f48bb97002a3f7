"""
Resized image variants.

The service resizes uploaded images to fixed widths. A resized copy is
addressed by appending its one-character size identifier to the blob handle
returned from Images.post_image. Aspect ratio and EXIF orientation are kept.
"""

from enum import Enum

from .models import ImageType


class ImageSize(str, Enum):
    """Size identifiers and the pixel width they stand for."""

    TINY = "d"
    SMALL = "h"
    MEDIUM = "l"
    LARGE = "p"
    XLARGE = "t"
    XXLARGE = "x"

    @property
    def width(self) -> int:
        return _WIDTHS[self]


_WIDTHS = {
    ImageSize.TINY: 25,
    ImageSize.SMALL: 50,
    ImageSize.MEDIUM: 100,
    ImageSize.LARGE: 250,
    ImageSize.XLARGE: 500,
    ImageSize.XXLARGE: 1000,
}

SUPPORTED_SIZES: dict[ImageType, frozenset[ImageSize]] = {
    ImageType.USER_PHOTO: frozenset(ImageSize),
    ImageType.CONTENT_BLOB: frozenset(ImageSize),
    ImageType.APP_ICON: frozenset({ImageSize.MEDIUM}),
}


def resized_blob_handle(
    blob_handle: str,
    size: ImageSize | str,
    image_type: ImageType | str | None = None,
) -> str:
    """
    Blob handle of a resized copy of an uploaded image.

    Args:
        blob_handle: Handle returned by Images.post_image
        size: Size tier (ImageSize or its one-character identifier)
        image_type: Type the image was uploaded as; when given, the size
            must be one the service produces for that type

    Returns:
        Handle to pass to Images.get_image

    Raises:
        ValueError: Empty handle, unknown size or size not produced for
            image_type
    """
    if not blob_handle:
        raise ValueError("blob_handle must not be empty")

    size = ImageSize(size)
    if image_type is not None:
        image_type = ImageType(image_type)
        if size not in SUPPORTED_SIZES[image_type]:
            allowed = ", ".join(sorted(s.value for s in SUPPORTED_SIZES[image_type]))
            raise ValueError(
                f"{image_type.value} images are not resized to '{size.value}' "
                f"(supported: {allowed})"
            )

    return f"{blob_handle}{size.value}"
