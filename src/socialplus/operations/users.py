"""User accounts and profiles, and the current user's apps."""

from ..mapper import CompositeType, SequenceType
from ..models import (
    AppCompactView,
    FeedResponseUserCompactView,
    FeedResponseUserProfileView,
    PostUserRequest,
    PostUserResponse,
    PutUserInfoRequest,
    PutUserPhotoRequest,
    PutUserVisibilityRequest,
    UserProfileView,
)
from .base import PAGING, OperationGroup, operation, path, query

POST_USER = operation(
    "Users", "post_user", "POST", "/users",
    "Create a new user",
    body=PostUserRequest,
    response=PostUserResponse,
    auth="optional",
)
GET_MY_PROFILE = operation(
    "Users", "get_my_profile", "GET", "/users/me",
    "Get my profile",
    response=UserProfileView,
)
DELETE_USER = operation(
    "Users", "delete_user", "DELETE", "/users/me",
    "Delete user",
)
PUT_USER_INFO = operation(
    "Users", "put_user_info", "PUT", "/users/me/info",
    "Update user info",
    body=PutUserInfoRequest,
)
PUT_USER_PHOTO = operation(
    "Users", "put_user_photo", "PUT", "/users/me/photo",
    "Update user photo",
    body=PutUserPhotoRequest,
)
PUT_USER_VISIBILITY = operation(
    "Users", "put_user_visibility", "PUT", "/users/me/visibility",
    "Update user visibility",
    body=PutUserVisibilityRequest,
)
GET_USER = operation(
    "Users", "get_user", "GET", "/users/{userHandle}",
    "Get user profile",
    parameters=(path("userHandle"),),
    response=UserProfileView,
    auth="optional",
)
GET_POPULAR_USERS = operation(
    "Users", "get_popular_users", "GET", "/users/popular",
    "Get popular users",
    parameters=PAGING,
    response=FeedResponseUserProfileView,
    auth="optional",
)

GET_MY_APPS = operation(
    "MyApps", "get_apps", "GET", "/users/me/apps",
    "Get my list of Social Plus apps",
    response=SequenceType(CompositeType("AppCompactView")),
)
GET_APP_FOLLOWING_DIFFERENCE = operation(
    "MyAppFollowing", "get_users", "GET", "/users/me/apps/{appHandle}/following/difference",
    "Find users the current user is following in another app but not in the current app",
    parameters=(path("appHandle"), query("cursor")),
    response=FeedResponseUserCompactView,
)


class Users(OperationGroup):
    async def post_user(
        self,
        request: PostUserRequest,
        *,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> PostUserResponse:
        """Create a new user; the response carries a session token for it."""
        return await self._call(
            POST_USER,
            body=request,
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_my_profile(
        self,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> UserProfileView:
        """Get my profile."""
        return await self._call(
            GET_MY_PROFILE,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def delete_user(
        self,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Delete user."""
        await self._call(
            DELETE_USER,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def put_user_info(
        self,
        request: PutUserInfoRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Update user info."""
        await self._call(
            PUT_USER_INFO,
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def put_user_photo(
        self,
        request: PutUserPhotoRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Update user photo."""
        await self._call(
            PUT_USER_PHOTO,
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def put_user_visibility(
        self,
        request: PutUserVisibilityRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Update user visibility."""
        await self._call(
            PUT_USER_VISIBILITY,
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_user(
        self,
        user_handle: str,
        *,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> UserProfileView:
        """Get user profile."""
        return await self._call(
            GET_USER,
            params={"userHandle": user_handle},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def get_popular_users(
        self,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseUserProfileView:
        """Get popular users."""
        return await self._call(
            GET_POPULAR_USERS,
            params={"cursor": cursor, "limit": limit},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )


class MyApps(OperationGroup):
    async def get_apps(
        self,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> list[AppCompactView]:
        """Get my list of Social Plus apps."""
        return await self._call(
            GET_MY_APPS,
            authorization=authorization,
            custom_headers=custom_headers,
        )


class MyAppFollowing(OperationGroup):
    async def get_users(
        self,
        app_handle: str,
        authorization: str,
        *,
        cursor: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> FeedResponseUserCompactView:
        """Find users I follow in another app but not in the current app."""
        return await self._call(
            GET_APP_FOLLOWING_DIFFERENCE,
            params={"appHandle": app_handle, "cursor": cursor},
            authorization=authorization,
            custom_headers=custom_headers,
        )
