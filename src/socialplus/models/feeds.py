"""
Feed responses: one page of items plus the cursor for the next page.

On the wire each feed is named ``FeedResponse[<ItemType>]``.
"""

from pydantic import StrictStr

from .base import Model, model, wire
from .views import (
    ActivityView,
    CommentView,
    ReplyView,
    TopicView,
    UserCompactView,
    UserProfileView,
)


class FeedResponse(Model):
    """Marker base for feed responses (``data`` and ``cursor``)."""


def _data():
    return wire("data", required=True, description="Feed data")


def _cursor():
    return wire("cursor", required=True, description="Feed cursor")


@model("FeedResponse[ActivityView]")
class FeedResponseActivityView(FeedResponse):
    data: list[ActivityView] = _data()
    cursor: StrictStr = _cursor()


@model("FeedResponse[CommentView]")
class FeedResponseCommentView(FeedResponse):
    data: list[CommentView] = _data()
    cursor: StrictStr = _cursor()


@model("FeedResponse[ReplyView]")
class FeedResponseReplyView(FeedResponse):
    data: list[ReplyView] = _data()
    cursor: StrictStr = _cursor()


@model("FeedResponse[TopicView]")
class FeedResponseTopicView(FeedResponse):
    data: list[TopicView] = _data()
    cursor: StrictStr = _cursor()


@model("FeedResponse[UserCompactView]")
class FeedResponseUserCompactView(FeedResponse):
    data: list[UserCompactView] = _data()
    cursor: StrictStr = _cursor()


@model("FeedResponse[UserProfileView]")
class FeedResponseUserProfileView(FeedResponse):
    data: list[UserProfileView] = _data()
    cursor: StrictStr = _cursor()
