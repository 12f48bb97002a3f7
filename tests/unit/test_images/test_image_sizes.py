"""Tests for resized image handles."""

import pytest

from socialplus.images import SUPPORTED_SIZES, ImageSize, resized_blob_handle
from socialplus.models import ImageType


def test_widths() -> None:
    assert [size.width for size in ImageSize] == [25, 50, 100, 250, 500, 1000]


def test_appends_size_identifier() -> None:
    assert resized_blob_handle("abc123", ImageSize.LARGE) == "abc123p"
    assert resized_blob_handle("abc123", "x") == "abc123x"


@pytest.mark.parametrize("image_type", [ImageType.USER_PHOTO, ImageType.CONTENT_BLOB])
def test_photos_and_content_support_every_size(image_type) -> None:
    assert SUPPORTED_SIZES[image_type] == frozenset(ImageSize)
    assert resized_blob_handle("h", ImageSize.TINY, image_type) == "hd"


def test_app_icons_only_come_in_medium() -> None:
    assert resized_blob_handle("icon", "l", "AppIcon") == "iconl"

    with pytest.raises(ValueError, match="supported: l"):
        resized_blob_handle("icon", ImageSize.TINY, ImageType.APP_ICON)


def test_unknown_size() -> None:
    with pytest.raises(ValueError):
        resized_blob_handle("h", "q")


def test_empty_handle() -> None:
    with pytest.raises(ValueError):
        resized_blob_handle("", ImageSize.MEDIUM)
