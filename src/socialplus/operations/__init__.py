"""SocialPlus operation groups, one class per resource family."""

from .base import BINARY, CATALOG, PAGING, Operation, OperationGroup, Parameter
from .blobs import Blobs, Images
from .comments import CommentReplies, Comments, Replies, TopicComments
from .follows import (
    MyBlockedUsers,
    MyFollowers,
    MyFollowing,
    MyPendingUsers,
    UserFollowers,
    UserFollowing,
)
from .likes import (
    CommentLikes,
    CommentReports,
    MyLikes,
    ReplyLikes,
    ReplyReports,
    TopicLikes,
    TopicReports,
    UserReports,
)
from .misc import Builds, Hashtags, Search
from .notifications import MyNotifications, MyPins, MyPushRegistrations
from .sessions import MyLinkedAccounts, RequestTokens, Sessions
from .topics import MyTopics, Topics, UserTopics
from .users import MyAppFollowing, MyApps, Users

__all__ = [
    "BINARY",
    "CATALOG",
    "PAGING",
    "Operation",
    "OperationGroup",
    "Parameter",
    "Blobs",
    "Builds",
    "CommentLikes",
    "CommentReplies",
    "CommentReports",
    "Comments",
    "Hashtags",
    "Images",
    "MyAppFollowing",
    "MyApps",
    "MyBlockedUsers",
    "MyFollowers",
    "MyFollowing",
    "MyLikes",
    "MyLinkedAccounts",
    "MyNotifications",
    "MyPendingUsers",
    "MyPins",
    "MyPushRegistrations",
    "MyTopics",
    "Replies",
    "ReplyLikes",
    "ReplyReports",
    "RequestTokens",
    "Search",
    "Sessions",
    "TopicComments",
    "TopicLikes",
    "TopicReports",
    "Topics",
    "UserFollowers",
    "UserFollowing",
    "UserReports",
    "Users",
    "UserTopics",
]
