"""
SocialPlus - Python client for the SocialPlus social graph service.

Typed models for every wire type, a schema-driven serializer that validates
values before they leave or after they arrive, and an async client exposing
each operation group of the service.

Example:
    import asyncio
    from socialplus import SocialPlusClient, paginate
    from socialplus.models import PostTopicRequest, PublisherType

    async def main():
        async with SocialPlusClient(appkey="my-app-key") as client:
            session = await client.sessions.post_session(...)
            auth = f"Bearer {session.session_token}"

            await client.topics.post_topic(
                PostTopicRequest(publisher_type=PublisherType.USER, text="Hello"),
                auth,
            )

            async for topic in paginate(client.topics.get_topics, max_items=50):
                print(topic.topic_handle, topic.text)

    asyncio.run(main())
"""

__version__ = "0.1.0"

# Core exports
from .client import SocialPlusClient
from .config import SocialPlusConfig, load_config
from .errors import (
    ApiError,
    AuthenticationError,
    MapperError,
    SocialPlusError,
    ValidationError,
)
from .images import ImageSize, resized_blob_handle
from .models import MODELS, Model, get_serializer
from .pagination import paginate

__all__ = [
    "__version__",
    "SocialPlusClient",
    "SocialPlusConfig",
    "load_config",
    "ApiError",
    "AuthenticationError",
    "MapperError",
    "SocialPlusError",
    "ValidationError",
    "ImageSize",
    "resized_blob_handle",
    "MODELS",
    "Model",
    "get_serializer",
    "paginate",
]
