"""
Read models returned by the service.

Compact views (user, content, app) are abbreviated projections embedded in
the larger views and in feeds.
"""

from pydantic import StrictBool, StrictInt, StrictStr

from ..mapper import DateTime
from .base import Model, model, wire
from .enums import (
    ActivityType,
    BlobType,
    ContentStatus,
    ContentType,
    FollowerStatus,
    IdentityProvider,
    PlatformType,
    ProfileStatus,
    PublisherType,
    UserVisibility,
)


@model()
class UserCompactView(Model):
    """User compact view."""

    user_handle: StrictStr = wire("userHandle", required=True, description="User handle")
    first_name: StrictStr = wire("firstName", required=True, description="First name of the user")
    last_name: StrictStr = wire("lastName", required=True, description="Last name of the user")
    photo_handle: StrictStr | None = wire("photoHandle", description="Photo handle of the user")
    photo_url: StrictStr | None = wire("photoUrl", description="Photo url of the user")
    visibility: UserVisibility = wire(
        "visibility", required=True, description="Visibility of the user"
    )
    follower_status: FollowerStatus = wire(
        "followerStatus",
        required=True,
        description="Follower relationship status of the querying user",
    )


@model()
class ContentCompactView(Model):
    """Content compact view."""

    content_type: ContentType = wire("contentType", required=True)
    content_handle: StrictStr = wire("contentHandle", required=True)
    parent_handle: StrictStr | None = wire("parentHandle")
    root_handle: StrictStr | None = wire("rootHandle")
    text: StrictStr | None = wire("text")
    blob_type: BlobType | None = wire("blobType")
    blob_handle: StrictStr | None = wire("blobHandle")
    blob_url: StrictStr | None = wire("blobUrl")


@model()
class AppCompactView(Model):
    """App compact view."""

    app_handle: StrictStr = wire("appHandle", required=True)
    name: StrictStr = wire("name", required=True)
    icon_handle: StrictStr | None = wire("iconHandle")
    icon_url: StrictStr | None = wire("iconUrl")
    platform_type: PlatformType = wire("platformType", required=True)
    deep_link: StrictStr | None = wire("deepLink")
    store_link: StrictStr | None = wire("storeLink")


@model()
class ActivityView(Model):
    """Activity view."""

    activity_handle: StrictStr = wire("activityHandle", required=True)
    created_time: DateTime = wire("createdTime", required=True)
    activity_type: ActivityType = wire("activityType", required=True)
    actor_users: list[UserCompactView] = wire("actorUsers", required=True)
    acted_on_user: UserCompactView | None = wire("actedOnUser")
    acted_on_content: ContentCompactView | None = wire("actedOnContent")
    total_actions: StrictInt = wire("totalActions", required=True)
    unread: StrictBool = wire("unread", required=True, description="Whether the activity was read")
    app: AppCompactView | None = wire("app", description="Containing app")


@model()
class ReplyView(Model):
    """Reply view."""

    reply_handle: StrictStr = wire("replyHandle", required=True)
    comment_handle: StrictStr = wire(
        "commentHandle", required=True, description="Parent comment handle"
    )
    topic_handle: StrictStr = wire("topicHandle", required=True, description="Root topic handle")
    created_time: DateTime = wire("createdTime", required=True)
    user: UserCompactView = wire("user", required=True, description="Owner of the reply")
    text: StrictStr = wire("text", required=True)
    language: StrictStr | None = wire("language")
    total_likes: StrictInt = wire("totalLikes", required=True)
    liked: StrictBool = wire(
        "liked", required=True, description="Whether the querying user has liked the reply"
    )
    content_status: ContentStatus | None = wire("contentStatus")


@model()
class CommentView(Model):
    """Comment view."""

    comment_handle: StrictStr = wire("commentHandle", required=True)
    topic_handle: StrictStr = wire("topicHandle", required=True, description="Parent topic handle")
    created_time: DateTime = wire("createdTime", required=True)
    user: UserCompactView = wire("user", required=True)
    text: StrictStr = wire("text", required=True)
    blob_type: BlobType | None = wire("blobType")
    blob_handle: StrictStr | None = wire("blobHandle")
    blob_url: StrictStr | None = wire("blobUrl")
    language: StrictStr | None = wire("language")
    total_likes: StrictInt = wire("totalLikes", required=True)
    total_replies: StrictInt = wire("totalReplies", required=True)
    liked: StrictBool = wire("liked", required=True)
    content_status: ContentStatus | None = wire("contentStatus")


@model()
class TopicView(Model):
    """
    Topic view.

    ``user`` is absent for topics published by an app rather than a user.
    """

    topic_handle: StrictStr = wire("topicHandle", required=True)
    created_time: DateTime = wire("createdTime", required=True)
    publisher_type: PublisherType = wire("publisherType", required=True)
    user: UserCompactView | None = wire("user")
    title: StrictStr | None = wire("title")
    text: StrictStr = wire("text", required=True)
    blob_type: BlobType | None = wire("blobType")
    blob_handle: StrictStr | None = wire("blobHandle")
    blob_url: StrictStr | None = wire("blobUrl")
    categories: StrictStr | None = wire("categories")
    language: StrictStr | None = wire("language")
    group: StrictStr | None = wire("group")
    deep_link: StrictStr | None = wire("deepLink")
    friendly_name: StrictStr | None = wire("friendlyName")
    total_likes: StrictInt = wire("totalLikes", required=True)
    total_comments: StrictInt = wire("totalComments", required=True)
    liked: StrictBool = wire("liked", required=True)
    pinned: StrictBool = wire("pinned", required=True)
    content_status: ContentStatus | None = wire("contentStatus")
    app: AppCompactView | None = wire("app")


@model()
class UserProfileView(Model):
    """User profile view."""

    user_handle: StrictStr = wire("userHandle", required=True)
    first_name: StrictStr = wire("firstName", required=True)
    last_name: StrictStr = wire("lastName", required=True)
    bio: StrictStr | None = wire("bio", description="Short bio of the user")
    photo_handle: StrictStr | None = wire("photoHandle")
    photo_url: StrictStr | None = wire("photoUrl")
    visibility: UserVisibility = wire("visibility", required=True)
    total_topics: StrictInt = wire("totalTopics", required=True)
    total_followers: StrictInt = wire("totalFollowers", required=True)
    total_following: StrictInt = wire("totalFollowing", required=True)
    follower_status: FollowerStatus | None = wire(
        "followerStatus", description="Whether the querying user follows this user"
    )
    following_status: FollowerStatus | None = wire(
        "followingStatus", description="Whether this user follows the querying user"
    )
    profile_status: ProfileStatus = wire("profileStatus", required=True)


@model()
class LinkedAccountView(Model):
    """Linked account view."""

    identity_provider: IdentityProvider = wire("identityProvider", required=True)
    account_id: StrictStr = wire("accountId", required=True)
