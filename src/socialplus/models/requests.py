"""Request bodies sent to the service."""

from pydantic import StrictBool, StrictStr

from ..mapper import DateTime
from .base import Model, model, wire
from .enums import BlobType, IdentityProvider, PublisherType, ReportReason, UserVisibility


@model()
class PostCommentRequest(Model):
    """Request to post (create) a comment."""

    text: StrictStr = wire("text", required=True, description="Comment text")
    blob_type: BlobType | None = wire("blobType")
    blob_handle: StrictStr | None = wire("blobHandle")
    language: StrictStr | None = wire("language")


@model()
class PostReplyRequest(Model):
    """Request to post (create) a reply."""

    text: StrictStr = wire("text", required=True, description="Reply text")
    language: StrictStr | None = wire("language")


@model()
class PostTopicRequest(Model):
    """Request to post (create) a topic."""

    publisher_type: PublisherType = wire("publisherType", required=True)
    title: StrictStr | None = wire("title")
    text: StrictStr = wire("text", required=True)
    blob_type: BlobType | None = wire("blobType")
    blob_handle: StrictStr | None = wire("blobHandle")
    categories: StrictStr | None = wire("categories")
    language: StrictStr | None = wire("language")
    deep_link: StrictStr | None = wire("deepLink")
    friendly_name: StrictStr | None = wire("friendlyName")
    group: StrictStr | None = wire("group")


@model()
class PutTopicRequest(Model):
    """Request to put (update) a topic."""

    title: StrictStr | None = wire("title")
    text: StrictStr = wire("text", required=True)
    categories: StrictStr | None = wire("categories")


@model()
class PutNotificationsStatusRequest(Model):
    """Request to mark notifications as read up to an activity."""

    read_activity_handle: StrictStr = wire(
        "readActivityHandle", required=True, description="Last read activity handle"
    )


@model()
class PostPinRequest(Model):
    topic_handle: StrictStr = wire("topicHandle", required=True)


@model()
class PutPushRegistrationRequest(Model):
    """Request to put push registration (register or update)."""

    last_updated_time: DateTime = wire(
        "lastUpdatedTime",
        required=True,
        description="Last updated time from the OS; registrations not updated "
        "for 30 days are expired",
    )
    language: StrictStr = wire("language", required=True, description="Language of the user")


@model()
class PostReportRequest(Model):
    reason: ReportReason = wire("reason", required=True)


@model()
class PostSessionRequest(Model):
    """Request to create a session (sign in)."""

    identity_provider: IdentityProvider = wire("identityProvider", required=True)
    access_token: StrictStr | None = wire(
        "accessToken",
        description="Access token, user code or verifier obtained from the identity provider",
    )
    request_token: StrictStr | None = wire(
        "requestToken", description="Request token obtained from the identity provider"
    )
    instance_id: StrictStr = wire(
        "instanceId", required=True, description="Unique installation id of the app"
    )
    create_user: StrictBool | None = wire(
        "createUser", description="Create a new user if the user doesn't exist"
    )


@model()
class PostFollowingRequest(Model):
    user_handle: StrictStr = wire("userHandle", required=True)


@model()
class PostFollowerRequest(Model):
    user_handle: StrictStr = wire("userHandle", required=True)


@model()
class PostBlockedUserRequest(Model):
    user_handle: StrictStr = wire("userHandle", required=True)


@model()
class PostUserRequest(Model):
    """Request to post (create) a user."""

    identity_provider: IdentityProvider = wire("identityProvider", required=True)
    access_token: StrictStr | None = wire("accessToken")
    request_token: StrictStr | None = wire("requestToken")
    instance_id: StrictStr = wire("instanceId", required=True)
    first_name: StrictStr | None = wire("firstName")
    last_name: StrictStr | None = wire("lastName")
    bio: StrictStr | None = wire("bio")
    photo_handle: StrictStr | None = wire("photoHandle")


@model()
class PutUserInfoRequest(Model):
    first_name: StrictStr | None = wire("firstName")
    last_name: StrictStr | None = wire("lastName")
    bio: StrictStr | None = wire("bio")


@model()
class PutUserPhotoRequest(Model):
    """Request to put (update) user photo."""

    photo_handle: StrictStr | None = wire("photoHandle", description="Photo handle of the user")


@model()
class PutUserVisibilityRequest(Model):
    visibility: UserVisibility = wire("visibility", required=True)


@model()
class PostLinkedAccountRequest(Model):
    """Request to link another identity provider account to the current user."""

    identity_provider: IdentityProvider = wire("identityProvider", required=True)
    access_token: StrictStr | None = wire("accessToken")
    request_token: StrictStr | None = wire("requestToken")
