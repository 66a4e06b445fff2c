"""
Events
Stream event names and the registry that fans them out to subscribers.
"""

from enum import Enum
from threading import RLock
from typing import Callable, Dict, List, Optional, Union

from .logger import logger


class TwitterEvent(str, Enum):
    """Logical events fired by a stream adapter."""

    # every decoded object received on the stream, unprocessed
    ANY = 'ANY'
    LIMIT = 'LIMIT'

    TWEET = 'TWEET'
    TWEET_NOT_RETWEET = 'TWEET_NOT_RETWEET'
    TWEET_RETWEET = 'TWEET_RETWEET'

    FRIENDS = 'FRIENDS'
    DIRECT_MESSAGE = 'DIRECT_MESSAGE'

    USER_EVENT = 'USER_EVENT'
    USER_EVENT_BLOCKED = 'USER_EVENT_BLOCKED'
    USER_EVENT_UNBLOCKED = 'USER_EVENT_UNBLOCKED'
    USER_EVENT_FAVORITE = 'USER_EVENT_FAVORITE'
    USER_EVENT_UNFAVORITE = 'USER_EVENT_UNFAVORITE'
    USER_EVENT_FOLLOW = 'USER_EVENT_FOLLOW'
    USER_EVENT_UNFOLLOW = 'USER_EVENT_UNFOLLOW'
    USER_EVENT_MUTE = 'USER_EVENT_MUTE'
    USER_EVENT_UNMUTE = 'USER_EVENT_UNMUTE'
    USER_EVENT_USER_UPDATE = 'USER_EVENT_USER_UPDATE'
    USER_EVENT_LIST_CREATED = 'USER_EVENT_LIST_CREATED'
    USER_EVENT_LIST_DESTROYED = 'USER_EVENT_LIST_DESTROYED'
    USER_EVENT_LIST_UPDATED = 'USER_EVENT_LIST_UPDATED'
    USER_EVENT_LIST_MEMBER_ADDED = 'USER_EVENT_LIST_MEMBER_ADDED'
    USER_EVENT_LIST_MEMBER_REMOVED = 'USER_EVENT_LIST_MEMBER_REMOVED'
    USER_EVENT_LIST_USER_SUBSCRIBED = 'USER_EVENT_LIST_USER_SUBSCRIBED'
    USER_EVENT_LIST_USER_UNSUBSCRIBED = 'USER_EVENT_LIST_USER_UNSUBSCRIBED'
    USER_EVENT_QUOTED_TWEET = 'USER_EVENT_QUOTED_TWEET'
    USER_EVENT_RETWEETED_RETWEET = 'USER_EVENT_RETWEETED_RETWEET'
    USER_EVENT_FAVORITED_RETWEET = 'USER_EVENT_FAVORITED_RETWEET'
    USER_EVENT_UNKNOWN = 'USER_EVENT_UNKNOWN'

    ERROR = 'ERROR'

    DELETE = 'DELETE'
    DELETE_DIRECT_MESSAGE = 'DELETE_DIRECT_MESSAGE'
    DELETE_STATUS = 'DELETE_STATUS'

    SCRUB_GEO = 'SCRUB_GEO'

    CONNECT = 'CONNECT'
    CONNECTED = 'CONNECTED'
    RECONNECT = 'RECONNECT'
    DISCONNECT = 'DISCONNECT'
    WARNING = 'WARNING'

    STATUS_WITHHELD = 'STATUS_WITHHELD'
    USER_WITHHELD = 'USER_WITHHELD'

    OTHER = 'OTHER'

    def __str__(self):
        return self.value


EventKey = Union[TwitterEvent, str]
ErrorHook = Callable[[str, Callable, BaseException], None]


def _key(event: EventKey) -> str:
    return event.value if isinstance(event, Enum) else event


class EventRegistry:
    """
    Ordered, per-name subscriber lists.

    Subscribers run synchronously on the thread that calls ``fire``, in the
    order they were registered. By default each call is isolated: an
    exception is logged, handed to ``on_error`` and the remaining subscribers
    still run. With ``raise_errors=True`` the first exception propagates out
    of ``fire`` and later subscribers for that firing are skipped.
    """

    def __init__(self, name: str = 'events', raise_errors: bool = False,
                 on_error: Optional[ErrorHook] = None):
        self.name = name
        self.raise_errors = raise_errors
        self.on_error = on_error
        self._lock = RLock()
        self._subscribers: Dict[str, List[Callable]] = {}

    def register(self, event: EventKey, subscriber: Callable) -> None:
        """Append ``subscriber`` to the list for ``event``."""
        with self._lock:
            self._subscribers.setdefault(_key(event), []).append(subscriber)

    def unregister(self, event: EventKey, subscriber: Callable) -> bool:
        """Remove the earliest registration of ``subscriber``; False if it was not registered."""
        with self._lock:
            subscribers = self._subscribers.get(_key(event))
            if not subscribers or subscriber not in subscribers:
                return False
            subscribers.remove(subscriber)
            return True

    def listener_count(self, event: EventKey) -> int:
        with self._lock:
            return len(self._subscribers.get(_key(event), ()))

    def event_names(self) -> List[str]:
        with self._lock:
            return list(self._subscribers)

    def fire(self, event: EventKey, *args) -> bool:
        """
        Invoke every subscriber of ``event`` with ``args``.

        Returns:
            False if nothing was ever registered under ``event``, True otherwise
        """
        key = _key(event)
        with self._lock:
            if key not in self._subscribers:
                return False
            subscribers = list(self._subscribers[key])

        for subscriber in subscribers:
            if self.raise_errors:
                subscriber(*args)
                continue
            try:
                subscriber(*args)
            except Exception as exc:
                logger.exception('[%s] Subscriber %r failed on %s', self.name, subscriber, key)
                if self.on_error:
                    self.on_error(key, subscriber, exc)
        return True
