"""SocialPlus data-transfer objects and their wire mappers."""

from .base import MODELS, Model, get_serializer, model, wire
from .enums import (
    ActivityType,
    BlobType,
    ContentStatus,
    ContentType,
    FollowerStatus,
    IdentityProvider,
    ImageType,
    PlatformType,
    ProfileStatus,
    PublisherType,
    ReportReason,
    TimeRange,
    UserVisibility,
)
from .feeds import (
    FeedResponse,
    FeedResponseActivityView,
    FeedResponseCommentView,
    FeedResponseReplyView,
    FeedResponseTopicView,
    FeedResponseUserCompactView,
    FeedResponseUserProfileView,
)
from .requests import (
    PostBlockedUserRequest,
    PostCommentRequest,
    PostFollowerRequest,
    PostFollowingRequest,
    PostLinkedAccountRequest,
    PostPinRequest,
    PostReplyRequest,
    PostReportRequest,
    PostSessionRequest,
    PostTopicRequest,
    PostUserRequest,
    PutNotificationsStatusRequest,
    PutPushRegistrationRequest,
    PutTopicRequest,
    PutUserInfoRequest,
    PutUserPhotoRequest,
    PutUserVisibilityRequest,
)
from .responses import (
    BuildsCurrentResponse,
    CountResponse,
    GetRequestTokenResponse,
    PostBlobResponse,
    PostCommentResponse,
    PostImageResponse,
    PostReplyResponse,
    PostSessionResponse,
    PostTopicResponse,
    PostUserResponse,
)
from .views import (
    ActivityView,
    AppCompactView,
    CommentView,
    ContentCompactView,
    LinkedAccountView,
    ReplyView,
    TopicView,
    UserCompactView,
    UserProfileView,
)

__all__ = [
    "MODELS",
    "Model",
    "get_serializer",
    "model",
    "wire",
    # Enums
    "ActivityType",
    "BlobType",
    "ContentStatus",
    "ContentType",
    "FollowerStatus",
    "IdentityProvider",
    "ImageType",
    "PlatformType",
    "ProfileStatus",
    "PublisherType",
    "ReportReason",
    "TimeRange",
    "UserVisibility",
    # Views
    "ActivityView",
    "AppCompactView",
    "CommentView",
    "ContentCompactView",
    "LinkedAccountView",
    "ReplyView",
    "TopicView",
    "UserCompactView",
    "UserProfileView",
    # Feeds
    "FeedResponse",
    "FeedResponseActivityView",
    "FeedResponseCommentView",
    "FeedResponseReplyView",
    "FeedResponseTopicView",
    "FeedResponseUserCompactView",
    "FeedResponseUserProfileView",
    # Requests
    "PostBlockedUserRequest",
    "PostCommentRequest",
    "PostFollowerRequest",
    "PostFollowingRequest",
    "PostLinkedAccountRequest",
    "PostPinRequest",
    "PostReplyRequest",
    "PostReportRequest",
    "PostSessionRequest",
    "PostTopicRequest",
    "PostUserRequest",
    "PutNotificationsStatusRequest",
    "PutPushRegistrationRequest",
    "PutTopicRequest",
    "PutUserInfoRequest",
    "PutUserPhotoRequest",
    "PutUserVisibilityRequest",
    # Responses
    "BuildsCurrentResponse",
    "CountResponse",
    "GetRequestTokenResponse",
    "PostBlobResponse",
    "PostCommentResponse",
    "PostImageResponse",
    "PostReplyResponse",
    "PostSessionResponse",
    "PostTopicResponse",
    "PostUserResponse",
]
