"""
Streaming connection to a v1.1 streaming endpoint.

The HTTP side (connecting, reading, stall detection and reconnect backoff)
is tweepy's ``BaseStream`` running on its own thread. ``StreamConnection``
decodes each received line and emits one named event per object.
"""
import json
from threading import RLock
from typing import Any, Callable, Dict, Optional, Union

from tweepy.streaming import BaseStream

from .auth import Auth
from .events import EventRegistry
from .logger import logger
from .utils import encode_bools

Params = Union[Dict[str, Any], Callable[[], Dict[str, Any]], None]

# user events forwarded under their own name, anything else is unknown_user_event
USER_EVENTS = (
    'blocked', 'unblocked', 'favorite', 'unfavorite', 'follow', 'unfollow',
    'mute', 'unmute', 'user_update', 'list_created', 'list_destroyed',
    'list_updated', 'list_member_added', 'list_member_removed',
    'list_user_subscribed', 'list_user_unsubscribed', 'quoted_tweet',
    'retweeted_retweet', 'favorited_retweet',
)

# (message key, emitted event), checked in order
MESSAGE_KEYS = (
    ('delete', 'delete'),
    ('scrub_geo', 'scrub_geo'),
    ('limit', 'limit'),
    ('status_withheld', 'status_withheld'),
    ('user_withheld', 'user_withheld'),
    ('friends', 'friends'),
    ('friends_str', 'friends'),
    ('direct_message', 'direct_message'),
    ('warning', 'warning'),
)


class TweepyStream(BaseStream):
    """tweepy stream that hands every callback to its ``StreamConnection``."""

    def __init__(self, owner: 'StreamConnection', **kwargs):
        super().__init__(**kwargs)
        self.owner = owner

    def on_connect(self):
        self.owner._on_connect(self)

    def on_data(self, raw_data):
        if self.running:
            self.owner._on_data(self, raw_data)

    def on_request_error(self, status_code):
        self.owner._on_request_error(self, status_code)

    def on_connection_error(self):
        self.owner._on_connection_error(self)

    def on_exception(self, exception):
        self.owner._on_exception(self, exception)

    def on_closed(self, response):
        logger.info('[%s] Stream closed by Twitter', self.owner.name)


class StreamConnection:
    """
    One streaming connection.

    Events: ``connect(request)``, ``connected(request)``, ``message(msg)``,
    ``tweet``, ``delete``, ``limit``, ``scrub_geo``, ``warning``,
    ``status_withheld``, ``user_withheld``, ``friends``, ``direct_message``,
    ``user_event`` plus the user event's own name, ``disconnect``,
    ``error(err)`` and ``reconnect(request, status_code, interval_ms)``.

    ``request`` is a dict with the method, url and parameters of the
    current connection. tweepy owns the reconnect wait, so ``interval_ms``
    is always None.
    """

    def __init__(self, url: str, params: Params = None, method: str = 'GET',
                 auth: Optional[Auth] = None, name: str = 'stream',
                 stream_factory: Optional[Callable[['StreamConnection'], BaseStream]] = None):
        self.url = url
        self.method = method.upper()
        self.name = name
        self._params = params
        self._signer = auth.apply_auth() if auth else None
        self._stream_factory = stream_factory or (lambda owner: TweepyStream(owner, daemon=True))
        self._emitter = EventRegistry(name=name)
        self._lock = RLock()
        self._stream: Optional[BaseStream] = None
        self._request: Optional[dict] = None

    def on(self, event: str, handler: Callable) -> None:
        self._emitter.register(event, handler)

    def emit(self, event: str, *args) -> bool:
        return self._emitter.fire(event, *args)

    @property
    def is_running(self) -> bool:
        stream = self._stream
        return stream is not None and stream.running

    def build_params(self) -> Dict[str, Any]:
        """Parameters for the next connection."""
        params = self._params() if callable(self._params) else self._params
        return encode_bools(dict(params or {}))

    def start(self) -> 'StreamConnection':
        """Connect, or drop the current connection and connect again."""
        with self._lock:
            if self._stream is not None:
                logger.info('[%s] Restarting stream', self.name)
                self._stream.disconnect()
            stream = self._stream_factory(self)
            self._stream = stream
            params = self.build_params()
            self._request = {'method': self.method, 'url': self.url, 'params': params}

        self.emit('connect', self._request)
        logger.debug('[%s] Connecting to %s', self.name, self.url)
        if self.method == 'GET':
            stream._threaded_connect(self.method, self.url, auth=self._signer, params=params)
        else:
            stream._threaded_connect(self.method, self.url, auth=self._signer, body=params)
        return self

    def stop(self) -> 'StreamConnection':
        with self._lock:
            stream, self._stream = self._stream, None
        if stream is not None:
            stream.disconnect()
            logger.info('[%s] Stream stopped', self.name)
        return self

    def _current(self, stream) -> bool:
        if stream is self._stream:
            return True
        # a replaced stream may still be starting up
        stream.disconnect()
        return False

    # --- tweepy callbacks ---

    def _on_connect(self, stream) -> None:
        if self._current(stream):
            logger.info('[%s] Stream connected', self.name)
            self.emit('connected', self._request)

    def _on_data(self, stream, raw_data) -> None:
        if not self._current(stream):
            return
        try:
            if isinstance(raw_data, bytes):
                raw_data = raw_data.decode('utf-8')
            msg = json.loads(raw_data)
        except ValueError:
            # UnicodeDecodeError is a ValueError too
            logger.warning('[%s] Skipping undecodable line: %.80r', self.name, raw_data)
            return
        self._dispatch(msg)

    def _on_request_error(self, stream, status_code) -> None:
        if not self._current(stream):
            return
        logger.warning('[%s] Stream rejected with HTTP %s', self.name, status_code)
        self.emit('error', {'status_code': status_code, 'message': f'Stream rejected with HTTP {status_code}'})
        self._notify_reconnect(stream, status_code)

    def _on_connection_error(self, stream) -> None:
        if not self._current(stream):
            return
        logger.warning('[%s] Stream connection error', self.name)
        self.emit('error', {'status_code': None, 'message': 'Stream connection error'})
        self._notify_reconnect(stream, None)

    def _on_exception(self, stream, exception) -> None:
        if not self._current(stream):
            return
        logger.error('[%s] Stream failed: %s', self.name, exception)
        self.emit('error', exception)

    def _notify_reconnect(self, stream, status_code) -> None:
        if stream.running:
            self.emit('reconnect', self._request, status_code, None)

    def _dispatch(self, msg) -> None:
        self.emit('message', msg)
        if not isinstance(msg, dict):
            return

        if 'disconnect' in msg:
            self.emit('disconnect', msg)
            self.stop()
            return
        for key, event in MESSAGE_KEYS:
            if key in msg:
                self.emit(event, msg)
                return
        if 'event' in msg:
            self.emit('user_event', msg)
            name = msg.get('event')
            self.emit(name if name in USER_EVENTS else 'unknown_user_event', msg)
            return
        if 'text' in msg or 'full_text' in msg:
            self.emit('tweet', msg)
