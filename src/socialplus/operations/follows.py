"""
The follower graph.

"Following" is who a user follows; "followers" is who follows them. Follow
requests to private users land in the target's pending users until accepted
(MyFollowers.post_follower) or rejected (MyPendingUsers.delete_pending_user).
"""

from ..models import (
    CountResponse,
    FeedResponseActivityView,
    FeedResponseTopicView,
    FeedResponseUserCompactView,
    PostBlockedUserRequest,
    PostFollowerRequest,
    PostFollowingRequest,
)
from .base import PAGING, OperationGroup, operation, path

GET_FOLLOWING = operation(
    "MyFollowing", "get_following", "GET", "/users/me/following/users",
    "Get my following",
    parameters=PAGING,
    response=FeedResponseUserCompactView,
)
POST_FOLLOWING = operation(
    "MyFollowing", "post_following", "POST", "/users/me/following/users",
    "Follow user",
    body=PostFollowingRequest,
)
DELETE_FOLLOWING = operation(
    "MyFollowing", "delete_following", "DELETE", "/users/me/following/users/{userHandle}",
    "Unfollow user",
    parameters=(path("userHandle"),),
)
DELETE_FOLLOWING_TOPIC = operation(
    "MyFollowing", "delete_topic", "DELETE", "/users/me/following/topics/{topicHandle}",
    "Hide topic from my following topics",
    parameters=(path("topicHandle"),),
)
GET_FOLLOWING_TOPICS = operation(
    "MyFollowing", "get_topics", "GET", "/users/me/following/topics",
    "Get my following topic feed",
    parameters=PAGING,
    response=FeedResponseTopicView,
)
GET_FOLLOWING_ACTIVITIES = operation(
    "MyFollowing", "get_activities", "GET", "/users/me/following/activities",
    "Get my following activity feed",
    parameters=PAGING,
    response=FeedResponseActivityView,
)

GET_USER_FOLLOWERS = operation(
    "UserFollowers", "get_followers", "GET", "/users/{userHandle}/followers",
    "Get followers of a user",
    parameters=(path("userHandle"), *PAGING),
    response=FeedResponseUserCompactView,
)
GET_MY_FOLLOWERS = operation(
    "MyFollowers", "get_followers", "GET", "/users/me/followers",
    "Get my followers",
    parameters=PAGING,
    response=FeedResponseUserCompactView,
)
POST_FOLLOWER = operation(
    "MyFollowers", "post_follower", "POST", "/users/me/followers",
    "Accept follower request",
    body=PostFollowerRequest,
)
DELETE_FOLLOWER = operation(
    "MyFollowers", "delete_follower", "DELETE", "/users/me/followers/{userHandle}",
    "Remove follower",
    parameters=(path("userHandle"),),
)
GET_USER_FOLLOWING = operation(
    "UserFollowing", "get_following", "GET", "/users/{userHandle}/following",
    "Get following users of a user",
    parameters=(path("userHandle"), *PAGING),
    response=FeedResponseUserCompactView,
)

DELETE_PENDING_USER = operation(
    "MyPendingUsers", "delete_pending_user", "DELETE", "/users/me/pending_users/{userHandle}",
    "Reject follower request",
    parameters=(path("userHandle"),),
)
GET_PENDING_USERS = operation(
    "MyPendingUsers", "get_pending_users", "GET", "/users/me/pending_users",
    "Get my pending users",
    parameters=PAGING,
    response=FeedResponseUserCompactView,
)
GET_PENDING_USERS_COUNT = operation(
    "MyPendingUsers", "get_pending_users_count", "GET", "/users/me/pending_users/count",
    "Get my pending users count",
    response=CountResponse,
)

GET_BLOCKED_USERS = operation(
    "MyBlockedUsers", "get_blocked_users", "GET", "/users/me/blocked_users",
    "Get my blocked users",
    parameters=PAGING,
    response=FeedResponseUserCompactView,
)
POST_BLOCKED_USER = operation(
    "MyBlockedUsers", "post_blocked_user", "POST", "/users/me/blocked_users",
    "Block user",
    body=PostBlockedUserRequest,
)
DELETE_BLOCKED_USER = operation(
    "MyBlockedUsers", "delete_blocked_user", "DELETE", "/users/me/blocked_users/{userHandle}",
    "Unblock user",
    parameters=(path("userHandle"),),
)


class MyFollowing(OperationGroup):
    async def get_following(
        self,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseUserCompactView:
        """Get my following."""
        return await self._call(
            GET_FOLLOWING,
            params={"cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def post_following(
        self,
        request: PostFollowingRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Follow user."""
        await self._call(
            POST_FOLLOWING,
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def delete_following(
        self,
        user_handle: str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Unfollow user."""
        await self._call(
            DELETE_FOLLOWING,
            params={"userHandle": user_handle},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def delete_topic(
        self,
        topic_handle: str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Hide topic from my following topics."""
        await self._call(
            DELETE_FOLLOWING_TOPIC,
            params={"topicHandle": topic_handle},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_topics(
        self,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseTopicView:
        """Get my following topic feed."""
        return await self._call(
            GET_FOLLOWING_TOPICS,
            params={"cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_activities(
        self,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseActivityView:
        """Get my following activity feed."""
        return await self._call(
            GET_FOLLOWING_ACTIVITIES,
            params={"cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )


class UserFollowers(OperationGroup):
    async def get_followers(
        self,
        user_handle: str,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseUserCompactView:
        """Get followers of a user."""
        return await self._call(
            GET_USER_FOLLOWERS,
            params={"userHandle": user_handle, "cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )


class MyFollowers(OperationGroup):
    async def get_followers(
        self,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseUserCompactView:
        """Get my followers."""
        return await self._call(
            GET_MY_FOLLOWERS,
            params={"cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def post_follower(
        self,
        request: PostFollowerRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Accept follower request."""
        await self._call(
            POST_FOLLOWER,
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def delete_follower(
        self,
        user_handle: str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Remove follower."""
        await self._call(
            DELETE_FOLLOWER,
            params={"userHandle": user_handle},
            authorization=authorization,
            custom_headers=custom_headers,
        )


class UserFollowing(OperationGroup):
    async def get_following(
        self,
        user_handle: str,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseUserCompactView:
        """Get following users of a user."""
        return await self._call(
            GET_USER_FOLLOWING,
            params={"userHandle": user_handle, "cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )


class MyPendingUsers(OperationGroup):
    async def delete_pending_user(
        self,
        user_handle: str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Reject follower request."""
        await self._call(
            DELETE_PENDING_USER,
            params={"userHandle": user_handle},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_pending_users(
        self,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseUserCompactView:
        """Get my pending users."""
        return await self._call(
            GET_PENDING_USERS,
            params={"cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_pending_users_count(
        self,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> CountResponse:
        """Get my pending users count."""
        return await self._call(
            GET_PENDING_USERS_COUNT,
            authorization=authorization,
            custom_headers=custom_headers,
        )


class MyBlockedUsers(OperationGroup):
    async def get_blocked_users(
        self,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseUserCompactView:
        """Get my blocked users."""
        return await self._call(
            GET_BLOCKED_USERS,
            params={"cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def post_blocked_user(
        self,
        request: PostBlockedUserRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Block user."""
        await self._call(
            POST_BLOCKED_USER,
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def delete_blocked_user(
        self,
        user_handle: str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Unblock user."""
        await self._call(
            DELETE_BLOCKED_USER,
            params={"userHandle": user_handle},
            authorization=authorization,
            custom_headers=custom_headers,
        )
