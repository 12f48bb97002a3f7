"""
HTTP runtime for the SocialPlus service.

SocialPlusClient turns an Operation declaration plus call arguments into an
httpx request, and the response back into typed models. Every operation
group of the service is attached to the client as an attribute:

    async with SocialPlusClient(appkey="...") as client:
        feed = await client.topics.get_topics(limit=20)
        for topic in feed.data:
            print(topic.title)
"""

import logging
import time
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from . import __version__
from .config import SocialPlusConfig
from .errors import ApiError, AuthenticationError, ValidationError
from .mapper import STRING
from .models import get_serializer
from .operations import (
    Blobs,
    Builds,
    CommentLikes,
    CommentReplies,
    CommentReports,
    Comments,
    Hashtags,
    Images,
    MyAppFollowing,
    MyApps,
    MyBlockedUsers,
    MyFollowers,
    MyFollowing,
    MyLikes,
    MyLinkedAccounts,
    MyNotifications,
    MyPendingUsers,
    MyPins,
    MyPushRegistrations,
    MyTopics,
    Replies,
    ReplyLikes,
    ReplyReports,
    RequestTokens,
    Search,
    Sessions,
    TopicComments,
    TopicLikes,
    TopicReports,
    Topics,
    UserFollowers,
    UserFollowing,
    UserReports,
    Users,
    UserTopics,
)
from .operations.base import Operation
from .utils.logging import OperationLogger

logger = logging.getLogger(__name__)

# Errors raised before the request reached the server; safe to retry for any verb
RETRYABLE_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout)


class SocialPlusClient:
    """Async client for the SocialPlus REST service."""

    def __init__(
        self,
        config: SocialPlusConfig | None = None,
        *,
        base_url: str | None = None,
        appkey: str | None = None,
        authorization: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize client.

        Args:
            config: Client configuration (defaults to SocialPlusConfig())
            base_url: Override for config.service.base_url
            appkey: Default app key for operations that accept one
            authorization: Default Authorization header value
            http_client: Pre-configured httpx client (not closed by close())
        """
        self.config = config or SocialPlusConfig()
        if base_url:
            service = self.config.service.model_copy(update={"base_url": base_url.rstrip("/")})
            self.config = self.config.model_copy(update={"service": service})

        self.appkey = appkey
        self.authorization = authorization
        self.serializer = get_serializer()

        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=self.config.service.timeout_seconds,
            headers={"User-Agent": f"socialplus-python/{__version__}"},
        )

        self.blobs = Blobs(self)
        self.builds = Builds(self)
        self.topic_comments = TopicComments(self)
        self.comments = Comments(self)
        self.hashtags = Hashtags(self)
        self.images = Images(self)
        self.comment_likes = CommentLikes(self)
        self.reply_likes = ReplyLikes(self)
        self.topic_likes = TopicLikes(self)
        self.my_notifications = MyNotifications(self)
        self.my_pins = MyPins(self)
        self.my_push_registrations = MyPushRegistrations(self)
        self.comment_replies = CommentReplies(self)
        self.replies = Replies(self)
        self.user_reports = UserReports(self)
        self.reply_reports = ReplyReports(self)
        self.comment_reports = CommentReports(self)
        self.topic_reports = TopicReports(self)
        self.search = Search(self)
        self.sessions = Sessions(self)
        self.request_tokens = RequestTokens(self)
        self.my_following = MyFollowing(self)
        self.user_followers = UserFollowers(self)
        self.my_followers = MyFollowers(self)
        self.user_following = UserFollowing(self)
        self.my_pending_users = MyPendingUsers(self)
        self.my_blocked_users = MyBlockedUsers(self)
        self.topics = Topics(self)
        self.my_app_following = MyAppFollowing(self)
        self.my_topics = MyTopics(self)
        self.my_apps = MyApps(self)
        self.users = Users(self)
        self.my_likes = MyLikes(self)
        self.my_linked_accounts = MyLinkedAccounts(self)
        self.user_topics = UserTopics(self)

    @classmethod
    def from_config(cls, config: SocialPlusConfig, **kwargs: Any) -> "SocialPlusClient":
        """Create a client with credentials read from the environment."""
        kwargs.setdefault("appkey", config.get_appkey())
        kwargs.setdefault("authorization", config.get_authorization())
        return cls(config, **kwargs)

    async def __aenter__(self) -> "SocialPlusClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying httpx client if this client created it."""
        if self._owns_http_client:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------

    def build_request(
        self,
        op: Operation,
        *,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        content: Any = None,
        content_type: str | None = None,
        authorization: str | None = None,
        appkey: str | None = None,
        custom_headers: Mapping[str, str] | None = None,
    ) -> httpx.Request:
        """
        Validate call arguments against an operation and build the request.

        Raises:
            ValidationError: If a required argument is missing or any
                argument does not match its declared type
        """
        params = params or {}
        path_values: dict[str, str] = {}
        query_values: dict[str, Any] = {}

        for param in op.parameters:
            value = params.get(param.name)
            if value is None:
                if param.required:
                    raise ValidationError(
                        param.name, "required parameter is missing", param.type.describe()
                    )
                continue
            wire_value = self.serializer.serialize(value, param.type, path=param.name)
            if param.location == "path":
                if wire_value == "":
                    raise ValidationError(param.name, "path parameter must not be empty", "String")
                path_values[param.name] = quote(str(wire_value), safe="")
            else:
                query_values[param.name] = wire_value

        headers: dict[str, str] = {}

        authorization = authorization or self.authorization
        if authorization is None:
            if op.auth == "required":
                raise ValidationError("authorization", "required parameter is missing", "String")
        else:
            self.serializer.serialize(authorization, STRING, path="authorization")
            headers["Authorization"] = authorization

        if op.accepts_appkey:
            appkey = appkey or self.appkey
            if appkey is not None:
                self.serializer.serialize(appkey, STRING, path="appkey")
                headers["appkey"] = appkey

        json_body = None
        if op.body is not None:
            if body is None:
                raise ValidationError("request", "required parameter is missing", op.body.__name__)
            json_body = self.serializer.serialize(body, op.body)
        elif op.binary_body:
            if content is None:
                raise ValidationError("content", "required parameter is missing", "bytes")
            headers["Content-Type"] = content_type or "application/octet-stream"

        if custom_headers:
            headers.update(custom_headers)

        return self._http.build_request(
            op.method,
            f"{self.config.api_root}{op.path.format(**path_values)}",
            params=query_values or None,
            headers=headers,
            json=json_body,
            content=content if op.binary_body else None,
        )

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    async def send(self, op: Operation, **arguments: Any) -> Any:
        """
        Issue an operation and return its typed result.

        Args:
            op: Operation declaration
            **arguments: See build_request()

        Returns:
            Deserialized model / list, raw bytes for binary endpoints, or
            None for operations without a response body

        Raises:
            ValidationError: Invalid arguments or malformed response body
            AuthenticationError: HTTP 401/403
            ApiError: Any other non-2xx status
        """
        request = self.build_request(op, **arguments)
        log = OperationLogger(
            logger, op=op.qualified_name, request=f"{request.method} {request.url.path}"
        )

        response = await self._transmit(request, log)
        if not response.is_success:
            raise self._error_for(op, response, log)

        return self._parse_response(op, response)

    async def _transmit(self, request: httpx.Request, log: OperationLogger) -> httpx.Response:
        max_retries = self.config.service.max_retries
        backoff = self.config.service.retry_backoff_seconds

        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            stop=stop_after_attempt(max_retries),
            wait=wait_exponential(multiplier=backoff, max=backoff * 10),
            reraise=True,
        ):
            with attempt:
                number = attempt.retry_state.attempt_number
                attempt_log = log.for_attempt(number) if number > 1 else log
                if number > 1:
                    attempt_log.warning(f"retrying ({number}/{max_retries})")
                start = time.monotonic()
                response = await self._http.send(request)
                attempt_log.debug(f"-> {response.status_code} ({time.monotonic() - start:.2f}s)")
                return response

        # reraise=True means the loop either returns or raises
        raise RuntimeError("Retry loop ended without a response")

    def _parse_response(self, op: Operation, response: httpx.Response) -> Any:
        if op.binary_response:
            return response.content
        if op.response is None or response.status_code == 204 or not response.content:
            return None

        try:
            data = response.json()
        except ValueError as e:
            raise ValidationError("", f"response body is not JSON: {e}") from e

        return self.serializer.deserialize(data, op.response)

    def _error_for(
        self, op: Operation, response: httpx.Response, log: OperationLogger
    ) -> ApiError:
        body: Any = None
        message = ""
        try:
            body = response.json()
        except ValueError:
            message = response.text[:500]
        else:
            if isinstance(body, Mapping):
                message = str(body.get("message") or body.get("Message") or body.get("error") or "")

        log.warning(f"failed: HTTP {response.status_code} {message}")

        error_class = AuthenticationError if response.status_code in (401, 403) else ApiError
        return error_class(response.status_code, op.qualified_name, message, body)
