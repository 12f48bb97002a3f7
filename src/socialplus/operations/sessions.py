"""Sign-in sessions, identity-provider request tokens and linked accounts."""

from ..mapper import CompositeType, EnumType, SequenceType
from ..models import (
    GetRequestTokenResponse,
    IdentityProvider,
    LinkedAccountView,
    PostLinkedAccountRequest,
    PostSessionRequest,
    PostSessionResponse,
)
from .base import OperationGroup, operation, path

POST_SESSION = operation(
    "Sessions", "post_session", "POST", "/sessions",
    "Create a new session (sign in)",
    body=PostSessionRequest,
    response=PostSessionResponse,
    auth="optional",
)
DELETE_SESSION = operation(
    "Sessions", "delete_session", "DELETE", "/sessions",
    "Delete the current session (sign out)",
)
GET_REQUEST_TOKEN = operation(
    "RequestTokens", "get_request_token", "GET", "/request_tokens/{identityProvider}",
    "Get request token",
    parameters=(path("identityProvider", EnumType(IdentityProvider)),),
    response=GetRequestTokenResponse,
    auth="optional",
)
GET_LINKED_ACCOUNTS = operation(
    "MyLinkedAccounts", "get_linked_accounts", "GET", "/users/me/linked_accounts",
    "Get linked accounts",
    response=SequenceType(CompositeType("LinkedAccountView")),
)
POST_LINKED_ACCOUNT = operation(
    "MyLinkedAccounts", "post_linked_account", "POST", "/users/me/linked_accounts",
    "Create a new linked account",
    body=PostLinkedAccountRequest,
)
DELETE_LINKED_ACCOUNT = operation(
    "MyLinkedAccounts", "delete_linked_account", "DELETE",
    "/users/me/linked_accounts/{identityProvider}",
    "Delete linked account",
    parameters=(path("identityProvider", EnumType(IdentityProvider)),),
)


class Sessions(OperationGroup):
    async def post_session(
        self,
        request: PostSessionRequest,
        *,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> PostSessionResponse:
        """
        Create a new session (sign in).

        The returned session token goes into the Authorization header of
        subsequent calls.
        """
        return await self._call(
            POST_SESSION,
            body=request,
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def delete_session(
        self,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Delete the current session (sign out)."""
        await self._call(
            DELETE_SESSION,
            authorization=authorization,
            custom_headers=custom_headers,
        )


class RequestTokens(OperationGroup):
    async def get_request_token(
        self,
        identity_provider: IdentityProvider | str,
        *,
        appkey: str | None = None,
        authorization: str | None = None,
        custom_headers: dict[str, str] | None = None,
    ) -> GetRequestTokenResponse:
        """Get a request token for providers that sign in with request tokens and verifiers."""
        return await self._call(
            GET_REQUEST_TOKEN,
            params={"identityProvider": identity_provider},
            appkey=appkey,
            authorization=authorization,
            custom_headers=custom_headers,
        )


class MyLinkedAccounts(OperationGroup):
    async def get_linked_accounts(
        self,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> list[LinkedAccountView]:
        """Get linked accounts."""
        return await self._call(
            GET_LINKED_ACCOUNTS,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def post_linked_account(
        self,
        request: PostLinkedAccountRequest,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Create a new linked account."""
        await self._call(
            POST_LINKED_ACCOUNT,
            body=request,
            authorization=authorization,
            custom_headers=custom_headers,
        )

    async def delete_linked_account(
        self,
        identity_provider: IdentityProvider | str,
        authorization: str,
        *,
        custom_headers: dict[str, str] | None = None,
    ) -> None:
        """Delete linked account."""
        await self._call(
            DELETE_LINKED_ACCOUNT,
            params={"identityProvider": identity_provider},
            authorization=authorization,
            custom_headers=custom_headers,
        )
