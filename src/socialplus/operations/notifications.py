"""The current user's notifications, pins and push registrations."""

from ..mapper import EnumType
from ..models import (
    CountResponse,
    FeedResponseActivityView,
    FeedResponseTopicView,
    PlatformType,
    PostPinRequest,
    PutNotificationsStatusRequest,
    PutPushRegistrationRequest,
)
from .base import PAGING, OperationGroup, operation, path

PUT_NOTIFICATIONS_STATUS = operation(
    "MyNotifications", "put_notifications_status", "PUT", "/users/me/notifications/status",
    "Update notifications status",
    body=PutNotificationsStatusRequest,
)
GET_NOTIFICATIONS = operation(
    "MyNotifications", "get_notifications", "GET", "/users/me/notifications",
    "Get notifications",
    parameters=PAGING,
    response=FeedResponseActivityView,
)
GET_NOTIFICATIONS_COUNT = operation(
    "MyNotifications", "get_notifications_count", "GET", "/users/me/notifications/count",
    "Get unread notifications count",
    response=CountResponse,
)

GET_PINS = operation(
    "MyPins", "get_pins", "GET", "/users/me/pins",
    "Get my pins",
    parameters=PAGING,
    response=FeedResponseTopicView,
)
POST_PIN = operation(
    "MyPins", "post_pin", "POST", "/users/me/pins",
    "Pin a topic",
    body=PostPinRequest,
)
DELETE_PIN = operation(
    "MyPins", "delete_pin", "DELETE", "/users/me/pins/{topicHandle}",
    "Unpin a topic",
    parameters=(path("topicHandle"),),
)

_PUSH_PATH = "/users/me/push_registrations/{platform}/{registrationId}"
_PUSH_PARAMETERS = (path("platform", EnumType(PlatformType)), path("registrationId"))

PUT_PUSH_REGISTRATION = operation(
    "MyPushRegistrations", "put_push_registration", "PUT", _PUSH_PATH,
    "Register for push notifications or update existing registration",
    parameters=_PUSH_PARAMETERS,
    body=PutPushRegistrationRequest,
)
DELETE_PUSH_REGISTRATION = operation(
    "MyPushRegistrations", "delete_push_registration", "DELETE", _PUSH_PATH,
    "Unregister from push notifications",
    parameters=_PUSH_PARAMETERS,
)


class MyNotifications(OperationGroup):
    async def put_notifications_status(
        self,
        request: PutNotificationsStatusRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Mark notifications read up to ``request.read_activity_handle``."""
        await self._call(
            PUT_NOTIFICATIONS_STATUS,
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_notifications(
        self,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseActivityView:
        """Get notifications."""
        return await self._call(
            GET_NOTIFICATIONS,
            params={"cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_notifications_count(
        self,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> CountResponse:
        """Get unread notifications count."""
        return await self._call(
            GET_NOTIFICATIONS_COUNT,
            authorization=authorization,
            custom_headers=custom_headers,
        )


class MyPins(OperationGroup):
    async def get_pins(
        self,
        authorization: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseTopicView:
        """Get my pins."""
        return await self._call(
            GET_PINS,
            params={"cursor": cursor, "limit": limit},
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def post_pin(
        self,
        request: PostPinRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Pin a topic."""
        await self._call(
            POST_PIN,
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def delete_pin(
        self,
        topic_handle: str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Unpin a topic."""
        await self._call(
            DELETE_PIN,
            params={"topicHandle": topic_handle},
            authorization=authorization,
            custom_headers=custom_headers,
        )


class MyPushRegistrations(OperationGroup):
    """
    Push notification registrations.

    ``registration_id`` is the id issued by the mobile OS: the GCM
    registration ID on Android, the PushNotificationChannel URI on Windows
    and the device token on iOS.
    """

    async def put_push_registration(
        self,
        platform: PlatformType | str,
        registration_id: str,
        request: PutPushRegistrationRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Register for push notifications or update existing registration."""
        await self._call(
            PUT_PUSH_REGISTRATION,
            params={"platform": platform, "registrationId": registration_id},
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def delete_push_registration(
        self,
        platform: PlatformType | str,
        registration_id: str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Unregister from push notifications."""
        await self._call(
            DELETE_PUSH_REGISTRATION,
            params={"platform": platform, "registrationId": registration_id},
            authorization=authorization,
            custom_headers=custom_headers,
        )
