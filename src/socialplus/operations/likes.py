"""Likes on topics, comments and replies, and content reports."""

from typing import ClassVar

from ..models import FeedResponseTopicView, FeedResponseUserCompactView, PostReportRequest
from .base import PAGING, Operation, OperationGroup, operation, path


def _like_operations(group: str, resource: str, handle: str) -> tuple[Operation, Operation, Operation]:
    noun = group.replace("Likes", "").lower()
    return (
        operation(
            group, "get_likes", "GET", f"/{resource}/{{{handle}}}/likes",
            f"Get likes for {noun}",
            parameters=(path(handle), *PAGING),
            response=FeedResponseUserCompactView,
            auth="optional",
        ),
        operation(
            group, "post_like", "POST", f"/{resource}/{{{handle}}}/likes",
            f"Add like to {noun}",
            parameters=(path(handle),),
        ),
        operation(
            group, "delete_like", "DELETE", f"/{resource}/{{{handle}}}/likes/me",
            f"Remove like from {noun}",
            parameters=(path(handle),),
        ),
    )


def _report_operation(group: str, resource: str, handle: str) -> Operation:
    noun = group.replace("Reports", "").lower()
    return operation(
        group, "post_report", "POST", f"/{resource}/{{{handle}}}/reports",
        f"Report {noun}",
        parameters=(path(handle),),
        body=PostReportRequest,
    )


GET_COMMENT_LIKES, POST_COMMENT_LIKE, DELETE_COMMENT_LIKE = _like_operations(
    "CommentLikes", "comments", "commentHandle"
)
GET_REPLY_LIKES, POST_REPLY_LIKE, DELETE_REPLY_LIKE = _like_operations(
    "ReplyLikes", "replies", "replyHandle"
)
GET_TOPIC_LIKES, POST_TOPIC_LIKE, DELETE_TOPIC_LIKE = _like_operations(
    "TopicLikes", "topics", "topicHandle"
)
GET_LIKED_TOPICS = operation(
    "MyLikes", "get_liked_topics", "GET", "/users/me/likes/topics",
    "Get my liked topics",
    parameters=PAGING,
    response=FeedResponseTopicView,
)

POST_USER_REPORT = _report_operation("UserReports", "users", "userHandle")
POST_REPLY_REPORT = _report_operation("ReplyReports", "replies", "replyHandle")
POST_COMMENT_REPORT = _report_operation("CommentReports", "comments", "commentHandle")
POST_TOPIC_REPORT = _report_operation("TopicReports", "topics", "topicHandle")


class _LikesGroup(OperationGroup):
    """Shared implementation of the three like groups."""

    handle_name: ClassVar[str]
    get_op: ClassVar[Operation]
    post_op: ClassVar[Operation]
    delete_op: ClassVar[Operation]

    async def _get_likes(self, handle: str, **kwargs) -> FeedResponseUserCompactView:
        return await self._call(
            self.get_op,
            params={
                self.handle_name: handle,
                "cursor": kwargs.pop("cursor"),
                "limit": kwargs.pop("limit"),
            },
            **kwargs,
        )

    async def _post_like(self, handle: str, **kwargs) -> None:
        await self._call(self.post_op, params={self.handle_name: handle}, **kwargs)

    async def _delete_like(self, handle: str, **kwargs) -> None:
        await self._call(self.delete_op, params={self.handle_name: handle}, **kwargs)


class CommentLikes(_LikesGroup):
    handle_name = "commentHandle"
    get_op = GET_COMMENT_LIKES
    post_op = POST_COMMENT_LIKE
    delete_op = DELETE_COMMENT_LIKE

    async def get_likes(
        self,
        comment_handle: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseUserCompactView:
        """Get likes for comment."""
        return await self._get_likes(
            comment_handle, cursor=cursor, limit=limit, appkey=appkey,
            authorization=authorization, custom_headers=custom_headers,
        )

    async def post_like(
        self, comment_handle: str, authorization: str, *, custom_headers: dict[str, str] | None = None
    ) -> None:
        """Add like to comment."""
        await self._post_like(comment_handle, authorization=authorization, custom_headers=custom_headers)

    async def delete_like(
        self, comment_handle: str, authorization: str, *, custom_headers: dict[str, str] | None = None
    ) -> None:
        """Remove like from comment."""
        await self._delete_like(comment_handle, authorization=authorization, custom_headers=custom_headers)


class ReplyLikes(_LikesGroup):
    handle_name = "replyHandle"
    get_op = GET_REPLY_LIKES
    post_op = POST_REPLY_LIKE
    delete_op = DELETE_REPLY_LIKE

    async def get_likes(
        self,
        reply_handle: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseUserCompactView:
        """Get likes for reply."""
        return await self._get_likes(
            reply_handle, cursor=cursor, limit=limit, appkey=appkey,
            authorization=authorization, custom_headers=custom_headers,
        )

    async def post_like(
        self, reply_handle: str, authorization: str, *, custom_headers: dict[str, str] | None = None
    ) -> None:
        """Add like to reply."""
        await self._post_like(reply_handle, authorization=authorization, custom_headers=custom_headers)

    async def delete_like(
        self, reply_handle: str, authorization: str, *, custom_headers: dict[str, str] | None = None
    ) -> None:
        """Remove like from reply."""
        await self._delete_like(reply_handle, authorization=authorization, custom_headers=custom_headers)


class TopicLikes(_LikesGroup):
    handle_name = "topicHandle"
    get_op = GET_TOPIC_LIKES
    post_op = POST_TOPIC_LIKE
    delete_op = DELETE_TOPIC_LIKE

    async def get_likes(
        self,
        topic_handle: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseUserCompactView:
        """Get likes for topic."""
        return await self._get_likes(
            topic_handle, cursor=cursor, limit=limit, appkey=appkey,
            authorization=authorization, custom_headers=custom_headers,
        )

    async def post_like(
        self, topic_handle: str, authorization: str, *, custom_headers: dict[str, str] | None = None
    ) -> None:
        """Add like to topic."""
        await self._post_like(topic_handle, authorization=authorization, custom_headers=custom_headers)

    async def delete_like(
        self, topic_handle: str, authorization: str, *, custom_headers: dict[str, str] | None = None
    ) -> None:
        """Remove like from topic."""
        await self._delete_like(topic_handle, authorization=authorization, custom_headers=custom_headers)


class MyLikes(OperationGroup):
    async def get_liked_topics(
        self,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseTopicView:
        """Get my liked topics."""
        return await self._call(
            GET_LIKED_TOPICS,
            params={"cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )


class _ReportsGroup(OperationGroup):
    handle_name: ClassVar[str]
    report_op: ClassVar[Operation]

    async def _post_report(
        self,
        handle: str,
        post_report_request: PostReportRequest,
        authorization: str,
        custom_headers: dict[str, str] | None,
    ) -> None:
        await self._call(
            self.report_op,
            params={self.handle_name: handle},
            body=post_report_request,
            authorization=authorization,
            custom_headers=custom_headers,
        )


class UserReports(_ReportsGroup):
    handle_name = "userHandle"
    report_op = POST_USER_REPORT

    async def post_report(
        self,
        user_handle: str,
        post_report_request: PostReportRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Report user."""
        await self._post_report(user_handle, post_report_request, authorization, custom_headers)


class ReplyReports(_ReportsGroup):
    handle_name = "replyHandle"
    report_op = POST_REPLY_REPORT

    async def post_report(
        self,
        reply_handle: str,
        post_report_request: PostReportRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Report reply."""
        await self._post_report(reply_handle, post_report_request, authorization, custom_headers)


class CommentReports(_ReportsGroup):
    handle_name = "commentHandle"
    report_op = POST_COMMENT_REPORT

    async def post_report(
        self,
        comment_handle: str,
        post_report_request: PostReportRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Report comment."""
        await self._post_report(comment_handle, post_report_request, authorization, custom_headers)


class TopicReports(_ReportsGroup):
    handle_name = "topicHandle"
    report_op = POST_TOPIC_REPORT

    async def post_report(
        self,
        topic_handle: str,
        post_report_request: PostReportRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Report topic."""
        await self._post_report(topic_handle, post_report_request, authorization, custom_headers)
