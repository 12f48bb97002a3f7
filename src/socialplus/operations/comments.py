"""Comments on topics and replies to comments."""

from ..models import (
    CommentView,
    FeedResponseCommentView,
    FeedResponseReplyView,
    PostCommentRequest,
    PostCommentResponse,
    PostReplyRequest,
    PostReplyResponse,
    ReplyView,
)
from .base import PAGING, OperationGroup, operation, path

GET_TOPIC_COMMENTS = operation(
    "TopicComments", "get_topic_comments", "GET", "/topics/{topicHandle}/comments",
    "Get comments for a topic",
    parameters=(path("topicHandle"), *PAGING),
    response=FeedResponseCommentView,
)
POST_COMMENT = operation(
    "TopicComments", "post_comment", "POST", "/topics/{topicHandle}/comments",
    "Create a new comment",
    parameters=(path("topicHandle"),),
    body=PostCommentRequest,
    response=PostCommentResponse,
)
GET_COMMENT = operation(
    "Comments", "get_comment", "GET", "/comments/{commentHandle}",
    "Get comment",
    parameters=(path("commentHandle"),),
    response=CommentView,
)
DELETE_COMMENT = operation(
    "Comments", "delete_comment", "DELETE", "/comments/{commentHandle}",
    "Delete comment",
    parameters=(path("commentHandle"),),
)
GET_REPLIES = operation(
    "CommentReplies", "get_replies", "GET", "/comments/{commentHandle}/replies",
    "Get replies for a comment",
    parameters=(path("commentHandle"), *PAGING),
    response=FeedResponseReplyView,
)
POST_REPLY = operation(
    "CommentReplies", "post_reply", "POST", "/comments/{commentHandle}/replies",
    "Create a new reply",
    parameters=(path("commentHandle"),),
    body=PostReplyRequest,
    response=PostReplyResponse,
)
GET_REPLY = operation(
    "Replies", "get_reply", "GET", "/replies/{replyHandle}",
    "Get reply",
    parameters=(path("replyHandle"),),
    response=ReplyView,
)
DELETE_REPLY = operation(
    "Replies", "delete_reply", "DELETE", "/replies/{replyHandle}",
    "Delete reply",
    parameters=(path("replyHandle"),),
)


class TopicComments(OperationGroup):
    async def get_topic_comments(
        self,
        topic_handle: str,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseCommentView:
        """Get comments for a topic."""
        return await self._call(
            GET_TOPIC_COMMENTS,
            params={"topicHandle": topic_handle, "cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def post_comment(
        self,
        topic_handle: str,
        request: PostCommentRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> PostCommentResponse:
        """Create a new comment."""
        return await self._call(
            POST_COMMENT,
            params={"topicHandle": topic_handle},
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )


class Comments(OperationGroup):
    async def get_comment(
        self,
        comment_handle: str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> CommentView:
        """Get comment."""
        return await self._call(
            GET_COMMENT,
            params={"commentHandle": comment_handle},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def delete_comment(
        self,
        comment_handle: str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Delete comment."""
        await self._call(
            DELETE_COMMENT,
            params={"commentHandle": comment_handle},
            authorization=authorization,
            custom_headers=custom_headers,
        )


class CommentReplies(OperationGroup):
    async def get_replies(
        self,
        comment_handle: str,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseReplyView:
        """Get replies for a comment."""
        return await self._call(
            GET_REPLIES,
            params={"commentHandle": comment_handle, "cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def post_reply(
        self,
        comment_handle: str,
        request: PostReplyRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> PostReplyResponse:
        """Create a new reply."""
        return await self._call(
            POST_REPLY,
            params={"commentHandle": comment_handle},
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )


class Replies(OperationGroup):
    async def get_reply(
        self,
        reply_handle: str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> ReplyView:
        """Get reply."""
        return await self._call(
            GET_REPLY,
            params={"replyHandle": reply_handle},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def delete_reply(
        self,
        reply_handle: str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Delete reply."""
        await self._call(
            DELETE_REPLY,
            params={"replyHandle": reply_handle},
            authorization=authorization,
            custom_headers=custom_headers,
        )
