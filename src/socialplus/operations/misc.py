"""Service build information, hashtags and search."""

from ..mapper import STRING, SequenceType
from ..models import BuildsCurrentResponse, FeedResponseTopicView, FeedResponseUserCompactView
from .base import PAGING, OperationGroup, operation, query

GET_BUILDS_CURRENT = operation(
    "Builds", "get_builds_current", "GET", "/builds/current",
    "The build information for this service",
    response=BuildsCurrentResponse,
    auth="optional",
)
GET_TRENDING_HASHTAGS = operation(
    "Hashtags", "get_trending_hashtags", "GET", "/hashtags/trending",
    "Get trending hashtags",
    response=SequenceType(STRING),
    auth="optional",
)
GET_AUTOCOMPLETED_HASHTAGS = operation(
    "Hashtags", "get_autocompleted_hashtags", "GET", "/hashtags/autocomplete",
    "Get autocompleted hashtags",
    parameters=(query("query", required=True),),
    response=SequenceType(STRING),
    auth="optional",
)
SEARCH_TOPICS = operation(
    "Search", "get_topics", "GET", "/search/topics",
    "Search topics with a query",
    parameters=(query("query", required=True), *PAGING),
    response=FeedResponseTopicView,
    auth="optional",
)
SEARCH_USERS = operation(
    "Search", "get_users", "GET", "/search/users",
    "Search users with a query",
    parameters=(query("query", required=True), *PAGING),
    response=FeedResponseUserCompactView,
    auth="optional",
)


def _offset(cursor: int | str | None) -> str | None:
    if isinstance(cursor, int) and not isinstance(cursor, bool):
        return str(cursor)
    return cursor


class Builds(OperationGroup):
    async def get_builds_current(
        self,
        *,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> BuildsCurrentResponse:
        """The build information for this service (meant for humans debugging)."""
        return await self._call(
            GET_BUILDS_CURRENT,
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )


class Hashtags(OperationGroup):
    async def get_trending_hashtags(
        self,
        *,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> list[str]:
        """Get trending hashtags."""
        return await self._call(
            GET_TRENDING_HASHTAGS,
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_autocompleted_hashtags(
        self,
        query: str,
        *,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> list[str]:
        """Get autocompleted hashtags."""
        return await self._call(
            GET_AUTOCOMPLETED_HASHTAGS,
            params={"query": query},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )


class Search(OperationGroup):
    """
    Full-text search.

    The cursor of these feeds is a numeric offset. It comes back as a string;
    either that string or the offset as an int is accepted.
    """

    async def get_topics(
        self,
        query: str,
        *,
        cursor: int | str | None = None,
        limit: int | None = None,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseTopicView:
        """Search topics with a query."""
        return await self._call(
            SEARCH_TOPICS,
            params={"query": query, "cursor": _offset(cursor), "limit": limit},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_users(
        self,
        query: str,
        *,
        cursor: int | str | None = None,
        limit: int | None = None,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseUserCompactView:
        """Search users with a query."""
        return await self._call(
            SEARCH_USERS,
            params={"query": query, "cursor": _offset(cursor), "limit": limit},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )
