"""Response bodies of write and utility operations."""

from pydantic import StrictInt, StrictStr

from .base import Model, model, wire


@model()
class PostBlobResponse(Model):
    blob_handle: StrictStr = wire("blobHandle", required=True)
    blob_url: StrictStr | None = wire("blobUrl")


@model()
class PostImageResponse(Model):
    blob_handle: StrictStr = wire("blobHandle", required=True)


@model()
class PostCommentResponse(Model):
    comment_handle: StrictStr = wire("commentHandle", required=True)


@model()
class PostReplyResponse(Model):
    reply_handle: StrictStr = wire("replyHandle", required=True)


@model()
class PostTopicResponse(Model):
    topic_handle: StrictStr = wire("topicHandle", required=True)


@model()
class PostSessionResponse(Model):
    session_token: StrictStr = wire("sessionToken", required=True)
    user_handle: StrictStr = wire("userHandle", required=True)


@model()
class PostUserResponse(Model):
    user_handle: StrictStr = wire("userHandle", required=True)
    session_token: StrictStr = wire("sessionToken", required=True)


@model()
class GetRequestTokenResponse(Model):
    request_token: StrictStr = wire("requestToken", required=True)


@model()
class CountResponse(Model):
    count: StrictInt = wire("count", required=True)


@model()
class BuildsCurrentResponse(Model):
    """Build information for the running service (meant for humans debugging)."""

    date_and_time: StrictStr | None = wire("dateAndTime")
    commit_hash: StrictStr | None = wire("commitHash")
    hostname: StrictStr | None = wire("hostname")
    branch_name: StrictStr | None = wire("branchName")
    service_api_version: StrictStr | None = wire("serviceApiVersion")
    dirty_files: list[StrictStr] | None = wire("dirtyFiles")
