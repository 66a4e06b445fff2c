"""Read-only views over raw API payloads."""

from .connections import Connections
from .direct_message import (
    DirectMessage,
    DirectMessageButtons,
    DirectMessageDelete,
    DirectMessageQuickReply,
    MessageCreateEvent,
)
from .entities import Entities, Hashtag, Media, Size, Symbol, Url, UserMention
from .error import DataError
from .event import Event
from .place import BoundingBox, Place
from .search import SearchMetadata, StandardSearch
from .tweet import ExtendedTweet, Tweet, TweetDelete
from .user import User

__all__ = [
    "BoundingBox",
    "Connections",
    "DataError",
    "DirectMessage",
    "DirectMessageButtons",
    "DirectMessageDelete",
    "DirectMessageQuickReply",
    "Entities",
    "Event",
    "ExtendedTweet",
    "Hashtag",
    "Media",
    "MessageCreateEvent",
    "Place",
    "SearchMetadata",
    "Size",
    "StandardSearch",
    "Symbol",
    "Tweet",
    "TweetDelete",
    "Url",
    "User",
    "UserMention",
]
