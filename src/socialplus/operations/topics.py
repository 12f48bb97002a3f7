"""Topics: the root content items, plus per-user topic feeds."""

from ..mapper import EnumType
from ..models import (
    FeedResponseTopicView,
    PostTopicRequest,
    PostTopicResponse,
    PutTopicRequest,
    TimeRange,
    TopicView,
)
from .base import PAGING, OperationGroup, operation, path

GET_TOPICS = operation(
    "Topics", "get_topics", "GET", "/topics",
    "Get recent topics",
    parameters=PAGING,
    response=FeedResponseTopicView,
    auth="optional",
)
POST_TOPIC = operation(
    "Topics", "post_topic", "POST", "/topics",
    "Create a new topic",
    body=PostTopicRequest,
    response=PostTopicResponse,
)
GET_TOPIC = operation(
    "Topics", "get_topic", "GET", "/topics/{topicHandle}",
    "Get topic",
    parameters=(path("topicHandle"),),
    response=TopicView,
    auth="optional",
)
PUT_TOPIC = operation(
    "Topics", "put_topic", "PUT", "/topics/{topicHandle}",
    "Update topic",
    parameters=(path("topicHandle"),),
    body=PutTopicRequest,
)
DELETE_TOPIC = operation(
    "Topics", "delete_topic", "DELETE", "/topics/{topicHandle}",
    "Delete topic",
    parameters=(path("topicHandle"),),
)
GET_POPULAR_TOPICS = operation(
    "Topics", "get_popular_topics", "GET", "/topics/popular/{timeRange}",
    "Get popular topics for a time range",
    parameters=(path("timeRange", EnumType(TimeRange)), *PAGING),
    response=FeedResponseTopicView,
    auth="optional",
)
GET_FEATURED_TOPICS = operation(
    "Topics", "get_featured_topics", "GET", "/topics/featured",
    "Get featured topics",
    parameters=PAGING,
    response=FeedResponseTopicView,
    auth="optional",
)

GET_MY_TOPICS = operation(
    "MyTopics", "get_topics", "GET", "/users/me/topics",
    "Get my topics sorted by creation time",
    parameters=PAGING,
    response=FeedResponseTopicView,
)
GET_MY_POPULAR_TOPICS = operation(
    "MyTopics", "get_popular_topics", "GET", "/users/me/topics/popular",
    "Get my topics sorted by popularity",
    parameters=PAGING,
    response=FeedResponseTopicView,
)

GET_USER_TOPICS = operation(
    "UserTopics", "get_topics", "GET", "/users/{userHandle}/topics",
    "Get user topics sorted by creation time",
    parameters=(path("userHandle"), *PAGING),
    response=FeedResponseTopicView,
    auth="optional",
)
GET_USER_POPULAR_TOPICS = operation(
    "UserTopics", "get_popular_topics", "GET", "/users/{userHandle}/topics/popular",
    "Get user topics sorted by popularity",
    parameters=(path("userHandle"), *PAGING),
    response=FeedResponseTopicView,
    auth="optional",
)


class Topics(OperationGroup):
    async def get_topics(
        self,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseTopicView:
        """Get recent topics."""
        return await self._call(
            GET_TOPICS,
            params={"cursor": cursor, "limit": limit},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def post_topic(
        self,
        request: PostTopicRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> PostTopicResponse:
        """Create a new topic."""
        return await self._call(
            POST_TOPIC,
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_topic(
        self,
        topic_handle: str,
        *,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> TopicView:
        """Get topic."""
        return await self._call(
            GET_TOPIC,
            params={"topicHandle": topic_handle},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def put_topic(
        self,
        topic_handle: str,
        request: PutTopicRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Update topic."""
        await self._call(
            PUT_TOPIC,
            params={"topicHandle": topic_handle},
            body=request,
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
        """Delete topic."""
        await self._call(
            DELETE_TOPIC,
            params={"topicHandle": topic_handle},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_popular_topics(
        self,
        time_range: TimeRange | str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseTopicView:
        """Get popular topics for a time range (Today, ThisWeek, ThisMonth, AllTime)."""
        return await self._call(
            GET_POPULAR_TOPICS,
            params={"timeRange": time_range, "cursor": cursor, "limit": limit},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_featured_topics(
        self,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseTopicView:
        """Get featured topics."""
        return await self._call(
            GET_FEATURED_TOPICS,
            params={"cursor": cursor, "limit": limit},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )


class MyTopics(OperationGroup):
    async def get_topics(
        self,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseTopicView:
        """Get my topics sorted by creation time."""
        return await self._call(
            GET_MY_TOPICS,
            params={"cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_popular_topics(
        self,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseTopicView:
        """Get my topics sorted by popularity."""
        return await self._call(
            GET_MY_POPULAR_TOPICS,
            params={"cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )


class UserTopics(OperationGroup):
    async def get_topics(
        self,
        user_handle: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseTopicView:
        """Get user topics sorted by creation time."""
        return await self._call(
            GET_USER_TOPICS,
            params={"userHandle": user_handle, "cursor": cursor, "limit": limit},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_popular_topics(
        self,
        user_handle: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseTopicView:
        """Get user topics sorted by popularity."""
        return await self._call(
            GET_USER_POPULAR_TOPICS,
            params={"userHandle": user_handle, "cursor": cursor, "limit": limit},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )
