"""Closed value sets used by model fields and path parameters."""

from enum import Enum


class ActivityType(str, Enum):
    LIKE = "Like"
    COMMENT = "Comment"
    REPLY = "Reply"
    COMMENT_PEER = "CommentPeer"
    REPLY_PEER = "ReplyPeer"
    FOLLOWING = "Following"
    FOLLOW_REQUEST = "FollowRequest"
    FOLLOW_ACCEPT = "FollowAccept"


class ContentType(str, Enum):
    UNKNOWN = "Unknown"
    TOPIC = "Topic"
    COMMENT = "Comment"
    REPLY = "Reply"


class BlobType(str, Enum):
    UNKNOWN = "Unknown"
    IMAGE = "Image"
    VIDEO = "Video"
    CUSTOM = "Custom"


class UserVisibility(str, Enum):
    PUBLIC = "Public"
    PRIVATE = "Private"


class FollowerStatus(str, Enum):
    """Relationship of the querying user to another user."""

    NONE = "None"
    FOLLOW = "Follow"
    PENDING = "Pending"
    BLOCKED = "Blocked"


class PlatformType(str, Enum):
    WINDOWS = "Windows"
    ANDROID = "Android"
    IOS = "IOS"


class ContentStatus(str, Enum):
    ACTIVE = "Active"
    BANNED = "Banned"


class ProfileStatus(str, Enum):
    ACTIVE = "Active"
    BANNED = "Banned"


class ReportReason(str, Enum):
    SPAM = "Spam"
    CYBERBULLYING = "Cyberbullying"
    CHILD_ENDANGERMENT = "ChildEndangerment"
    OFFENSIVE = "Offensive"
    CONTENT_INFRINGEMENT = "ContentInfringement"
    OTHER = "Other"


class IdentityProvider(str, Enum):
    FACEBOOK = "Facebook"
    MICROSOFT = "Microsoft"
    GOOGLE = "Google"
    TWITTER = "Twitter"


class PublisherType(str, Enum):
    USER = "User"
    APP = "App"


class ImageType(str, Enum):
    USER_PHOTO = "UserPhoto"
    CONTENT_BLOB = "ContentBlob"
    APP_ICON = "AppIcon"


class TimeRange(str, Enum):
    TODAY = "Today"
    THIS_WEEK = "ThisWeek"
    THIS_MONTH = "ThisMonth"
    ALL_TIME = "AllTime"
