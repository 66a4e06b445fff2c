"""
Stream adapter.

Binds the events of one ``StreamConnection`` to an ``EventRegistry`` and
classifies payloads before re-firing them as ``TwitterEvent`` members.
"""
from typing import Callable, Optional

from .data import DataError, DirectMessage, DirectMessageDelete, Event, Tweet, TweetDelete
from .events import EventKey, EventRegistry, TwitterEvent
from .logger import logger

ConnectionFactory = Callable[[], object]

# connection events forwarded with the raw payload
RAW_EVENTS = {
    'limit': TwitterEvent.LIMIT,
    'scrub_geo': TwitterEvent.SCRUB_GEO,
    'disconnect': TwitterEvent.DISCONNECT,
    'connect': TwitterEvent.CONNECT,
    'connected': TwitterEvent.CONNECTED,
    'warning': TwitterEvent.WARNING,
    'status_withheld': TwitterEvent.STATUS_WITHHELD,
    'user_withheld': TwitterEvent.USER_WITHHELD,
    'friends': TwitterEvent.FRIENDS,
    'user_event': TwitterEvent.USER_EVENT,
}

# user events forwarded wrapped in an Event view
USER_EVENTS = {
    'blocked': TwitterEvent.USER_EVENT_BLOCKED,
    'unblocked': TwitterEvent.USER_EVENT_UNBLOCKED,
    'favorite': TwitterEvent.USER_EVENT_FAVORITE,
    'unfavorite': TwitterEvent.USER_EVENT_UNFAVORITE,
    'follow': TwitterEvent.USER_EVENT_FOLLOW,
    'unfollow': TwitterEvent.USER_EVENT_UNFOLLOW,
    'mute': TwitterEvent.USER_EVENT_MUTE,
    'unmute': TwitterEvent.USER_EVENT_UNMUTE,
    'user_update': TwitterEvent.USER_EVENT_USER_UPDATE,
    'list_created': TwitterEvent.USER_EVENT_LIST_CREATED,
    'list_destroyed': TwitterEvent.USER_EVENT_LIST_DESTROYED,
    'list_updated': TwitterEvent.USER_EVENT_LIST_UPDATED,
    'list_member_added': TwitterEvent.USER_EVENT_LIST_MEMBER_ADDED,
    'list_member_removed': TwitterEvent.USER_EVENT_LIST_MEMBER_REMOVED,
    'list_user_subscribed': TwitterEvent.USER_EVENT_LIST_USER_SUBSCRIBED,
    'list_user_unsubscribed': TwitterEvent.USER_EVENT_LIST_USER_UNSUBSCRIBED,
    'quoted_tweet': TwitterEvent.USER_EVENT_QUOTED_TWEET,
    'retweeted_retweet': TwitterEvent.USER_EVENT_RETWEETED_RETWEET,
    'favorited_retweet': TwitterEvent.USER_EVENT_FAVORITED_RETWEET,
    'unknown_user_event': TwitterEvent.USER_EVENT_UNKNOWN,
}


class StreamAdapter:
    """
    Owns the registry of one logical stream and the connection feeding it.

    The connection is created by ``connection_factory`` on the first
    ``start()``; later calls restart that same connection. It is kept after
    ``stop()`` so the stream can be started again with the same bindings.
    Subscribers are invoked on the connection's worker thread.
    """

    def __init__(self, connection_factory: ConnectionFactory, client=None,
                 name: str = 'stream', registry: Optional[EventRegistry] = None):
        self.name = name
        self.client = client
        self.registry = registry or EventRegistry(name=name)
        self._connection_factory = connection_factory
        self.connection = None
        self._bound = False

    def register(self, event: EventKey, subscriber: Callable) -> None:
        self.registry.register(event, subscriber)

    def unregister(self, event: EventKey, subscriber: Callable) -> bool:
        return self.registry.unregister(event, subscriber)

    def fire(self, event: EventKey, *args) -> bool:
        return self.registry.fire(event, *args)

    @property
    def is_bound(self) -> bool:
        """True between ``start()`` and ``stop()``."""
        return self._bound

    def start(self):
        """Open the stream, or restart it if it was opened before. Returns the connection."""
        if self.connection is None:
            self.connection = self._connection_factory()
            self.bind(self.connection)
        logger.info('[%s] Starting stream', self.name)
        self._bound = True
        self.connection.start()
        return self.connection

    def stop(self):
        """Stop the stream. Returns None if it is not running, else the connection."""
        if not self._bound:
            return None
        self._bound = False
        self.connection.stop()
        return self.connection

    def restart(self):
        """``stop()`` then ``start()``; the new connection reads current parameters."""
        self.stop()
        return self.start()

    def bind(self, connection) -> None:
        """Subscribe to every known event of ``connection``. Done once per connection."""
        connection.on('tweet', self.on_tweet)
        connection.on('delete', self.on_delete)
        connection.on('direct_message', self.on_direct_message)
        connection.on('reconnect', self.on_reconnect)
        connection.on('error', self.on_error)
        connection.on('message', self.on_message)
        for source, target in RAW_EVENTS.items():
            connection.on(source, self._forward(target))
        for source, target in USER_EVENTS.items():
            connection.on(source, self._forward(target, Event))

    def _forward(self, event: TwitterEvent, view=None):
        def handler(payload):
            self.fire(event, view(payload) if view else payload)
        return handler

    # --- classifying handlers ---

    def on_tweet(self, payload: dict) -> None:
        tweet = Tweet(payload, self.client)
        self.fire(TwitterEvent.TWEET, tweet)
        if tweet.is_retweet:
            self.fire(TwitterEvent.TWEET_RETWEET, tweet)
        else:
            self.fire(TwitterEvent.TWEET_NOT_RETWEET, tweet)

    def on_delete(self, payload: dict) -> None:
        notice = payload.get('delete') or {}
        self.fire(TwitterEvent.DELETE, notice)
        if notice.get('direct_message'):
            self.fire(TwitterEvent.DELETE_DIRECT_MESSAGE, DirectMessageDelete(notice['direct_message']))
        else:
            self.fire(TwitterEvent.DELETE_STATUS, TweetDelete(notice.get('status')))

    def on_direct_message(self, payload: dict) -> None:
        self.fire(TwitterEvent.DIRECT_MESSAGE, DirectMessage(payload.get('direct_message'), self.client))

    def on_reconnect(self, request, status_code, interval_ms) -> None:
        self.fire(TwitterEvent.RECONNECT, request, status_code, interval_ms)

    def on_error(self, error) -> None:
        self.fire(TwitterEvent.ERROR, DataError(error))

    def on_message(self, payload) -> None:
        self.fire(TwitterEvent.ANY, payload)


class FilterStreamAdapter(StreamAdapter):
    """Adapter for ``statuses/filter``, carrying the track keywords."""

    def __init__(self, connection_factory: Callable[[Callable[[], dict]], object], client=None,
                 name: str = 'filter-stream', registry: Optional[EventRegistry] = None):
        super().__init__(lambda: connection_factory(self.build_params), client, name, registry)
        self._tracks = []

    @property
    def tracks(self):
        return list(self._tracks)

    def add_tracks(self, *tracks) -> None:
        """Add keywords; lists are flattened. Applied on the next (re)connect."""
        for track in tracks:
            if isinstance(track, (list, tuple, set)):
                self._tracks.extend(track)
            else:
                self._tracks.append(track)

    def reset_tracks(self) -> None:
        self._tracks = []

    def build_params(self) -> dict:
        """Read by the connection each time it connects."""
        return {'track': ','.join(str(t) for t in self._tracks)}
