"""
Tests for the model catalog.

Every model is registered, every composite reference resolves, and
requiredness of the request models matches what the service expects.
"""

from datetime import datetime, timezone

import pytest

from socialplus.errors import MapperError, ValidationError
from socialplus.mapper import DATETIME, CompositeType, SequenceType
from socialplus.models import (
    MODELS,
    CountResponse,
    Model,
    PostPinRequest,
    PostReportRequest,
    PostSessionRequest,
    PutPushRegistrationRequest,
    PutUserPhotoRequest,
    ReportReason,
    TopicView,
    model,
    wire,
)


def test_catalog_is_complete() -> None:
    expected = {
        # Views
        "UserCompactView", "ContentCompactView", "AppCompactView", "ActivityView",
        "ReplyView", "CommentView", "TopicView", "UserProfileView", "LinkedAccountView",
        # Feeds
        "FeedResponseActivityView", "FeedResponseCommentView", "FeedResponseReplyView",
        "FeedResponseTopicView", "FeedResponseUserCompactView", "FeedResponseUserProfileView",
        # Requests
        "PostCommentRequest", "PostReplyRequest", "PostTopicRequest", "PutTopicRequest",
        "PutNotificationsStatusRequest", "PostPinRequest", "PutPushRegistrationRequest",
        "PostReportRequest", "PostSessionRequest", "PostFollowingRequest",
        "PostFollowerRequest", "PostBlockedUserRequest", "PostUserRequest",
        "PutUserInfoRequest", "PutUserPhotoRequest", "PutUserVisibilityRequest",
        "PostLinkedAccountRequest",
        # Responses
        "PostBlobResponse", "PostImageResponse", "PostCommentResponse", "PostReplyResponse",
        "PostTopicResponse", "PostSessionResponse", "PostUserResponse",
        "GetRequestTokenResponse", "CountResponse", "BuildsCurrentResponse",
    }

    assert expected <= set(MODELS)


def test_every_composite_reference_resolves() -> None:
    for name, cls in MODELS.items():
        for ref in cls.mapper().composite_references():
            assert ref in MODELS, f"{name} references unknown model {ref}"


def test_composite_references_are_acyclic() -> None:
    visiting: set[str] = set()
    done: set[str] = set()

    def visit(name: str) -> None:
        assert name not in visiting, f"cycle through {name}"
        if name in done:
            return
        visiting.add(name)
        for ref in MODELS[name].mapper().composite_references():
            visit(ref)
        visiting.discard(name)
        done.add(name)

    for name in MODELS:
        visit(name)


def test_feed_wire_names() -> None:
    assert MODELS["FeedResponseTopicView"].mapper().serialized_name == "FeedResponse[TopicView]"
    assert MODELS["TopicView"].mapper().serialized_name == "TopicView"


def test_field_lookup_by_either_name() -> None:
    mapper = TopicView.mapper()

    assert mapper.field("total_likes") is mapper.field("totalLikes")
    with pytest.raises(KeyError):
        mapper.field("nope")


class TestRequestRequiredness:
    def test_user_photo_request_may_be_empty(self) -> None:
        assert PutUserPhotoRequest().to_dict() == {}

    def test_user_photo_request_with_handle(self) -> None:
        assert PutUserPhotoRequest(photo_handle="p1").to_dict() == {"photoHandle": "p1"}

    def test_push_registration_requires_both_fields(self) -> None:
        required = {f.serialized_name for f in PutPushRegistrationRequest.mapper().required_fields}

        assert required == {"lastUpdatedTime", "language"}

    def test_push_registration_missing_language(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PutPushRegistrationRequest(last_updated_time=datetime(2024, 1, 1, tzinfo=timezone.utc))

        assert exc_info.value.path == "language"
        assert exc_info.value.reason == "required field is missing"

    def test_session_request(self) -> None:
        request = PostSessionRequest(
            identity_provider="Google", access_token="tok", instance_id="device-1"
        )

        assert request.to_dict() == {
            "identityProvider": "Google",
            "accessToken": "tok",
            "instanceId": "device-1",
        }

    def test_report_request_reason(self) -> None:
        assert PostReportRequest(reason=ReportReason.SPAM).to_dict() == {"reason": "Spam"}
        with pytest.raises(ValidationError):
            PostReportRequest(reason="Rude").to_dict()


def test_from_dict() -> None:
    assert CountResponse.from_dict({"count": 7}) == CountResponse(count=7)


class TestDerivedMappers:
    """Mappers are read off the pydantic field declarations."""

    def test_field_names_and_types(self) -> None:
        mapper = TopicView.mapper()

        created = mapper.field("created_time")
        assert created.serialized_name == "createdTime"
        assert created.type == DATETIME
        assert created.required is True

        user = mapper.field("user")
        assert user.type == CompositeType("UserCompactView")
        assert user.required is False

    def test_sequence_of_models(self) -> None:
        data = MODELS["FeedResponseTopicView"].mapper().field("data")

        assert data.type == SequenceType(CompositeType("TopicView"))
        assert data.required is True

    def test_mapper_matches_pydantic_fields(self) -> None:
        for cls in MODELS.values():
            mapper = cls.mapper()
            assert [f.attribute for f in mapper.fields] == list(cls.model_fields)
            for f in mapper.fields:
                info = cls.model_fields[f.attribute]
                assert f.serialized_name == info.alias
                assert f.required == info.is_required()

    def test_construct_by_wire_name(self) -> None:
        assert PostPinRequest(topicHandle="t1").topic_handle == "t1"
        assert PostPinRequest(topic_handle="t1") == PostPinRequest(topicHandle="t1")

    def test_description_is_kept(self) -> None:
        unread = MODELS["ActivityView"].mapper().field("unread")

        assert unread.description == "Whether the activity was read"


class TestDeclarations:
    """Broken declarations fail at import time."""

    def test_field_without_wire_is_rejected(self) -> None:
        with pytest.raises(MapperError):

            @model()
            class Broken(Model):
                name: str | None = None

        assert "Broken" not in MODELS

    def test_duplicate_registration_is_rejected(self) -> None:
        with pytest.raises(MapperError):

            @model()
            class CountResponse(Model):  # noqa: F811
                count: int | None = wire("count")
