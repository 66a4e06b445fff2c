"""
Tweet views.

A ``Tweet`` may carry the client that produced it; the action methods
(``reply``, ``retweet``, ...) go through that client and return None when
there is none.
"""
from typing import List, Optional

from .base import DataView
from .entities import Entities, Media
from .place import Place
from .user import User


class ExtendedTweet(DataView):
    """The ``extended_tweet`` block of a streamed tweet longer than 140 characters."""

    @property
    def text(self):
        return self._get('full_text')

    @property
    def entities(self) -> Entities:
        return Entities(self._get('entities'))

    def __str__(self):
        return str(self.text)


class TweetDelete(DataView):
    """Body of a ``{"delete": {"status": ...}}`` stream notice."""

    @property
    def tweet_id(self):
        return self._get('id_str')

    @property
    def user_id(self):
        return self._get('user_id_str')

    @property
    def timestamp(self):
        return self._get('timestamp_ms')

    def __str__(self):
        return str(self.tweet_id)


class Tweet(DataView):
    def __init__(self, data: Optional[dict], client=None):
        super().__init__(data)
        self.client = client

    @property
    def id(self):
        return self._get('id_str')

    @property
    def text(self):
        if self._get('full_text'):
            return self._get('full_text')
        extended = self.extended_tweet
        return extended.text if extended is not None else self._get('text')

    @property
    def extended_tweet(self) -> Optional[ExtendedTweet]:
        return self._wrap('extended_tweet', ExtendedTweet)

    @property
    def entities(self) -> Entities:
        extended = self.extended_tweet
        return extended.entities if extended is not None else Entities(self._get('entities'))

    @property
    def media(self) -> Optional[List[Media]]:
        return Entities(self._get('entities')).media

    @property
    def truncated(self):
        return self._get('truncated')

    @property
    def is_quote_status(self):
        return self._get('is_quote_status')

    @property
    def quoted_status_id(self):
        return self._get('quoted_status_id_str')

    @property
    def quoted_status(self) -> Optional['Tweet']:
        value = self._get('quoted_status')
        return Tweet(value, self.client) if value is not None else None

    @property
    def quote_count(self):
        return self._get('quote_count')

    @property
    def reply_count(self):
        return self._get('reply_count')

    @property
    def retweet_count(self):
        return self._get('retweet_count')

    @property
    def favorite_count(self):
        return self._get('favorite_count')

    @property
    def favorited(self):
        return self._get('favorited')

    @property
    def retweeted(self):
        return self._get('retweeted')

    @property
    def language(self):
        return self._get('lang')

    @property
    def possibly_sensitive(self):
        return self._get('possibly_sensitive')

    @property
    def coordinates(self):
        """GeoJSON point, e.g. ``{"type": "Point", "coordinates": [lon, lat]}``."""
        return self._get('coordinates')

    @property
    def source(self):
        return self._get('source')

    @property
    def date(self):
        return self._get('created_at')

    @property
    def timestamp(self):
        return self._get('timestamp_ms')

    @property
    def filter_level(self):
        return self._get('filter_level')

    @property
    def in_reply_to_status_id(self):
        return self._get('in_reply_to_status_id_str')

    @property
    def in_reply_to_user_id(self):
        return self._get('in_reply_to_user_id_str')

    @property
    def in_reply_to_screen_name(self):
        return self._get('in_reply_to_screen_name')

    def is_reply(self) -> bool:
        return self.in_reply_to_status_id is not None

    @property
    def user(self) -> User:
        return User(self._get('user'))

    @property
    def place(self) -> Optional[Place]:
        return self._wrap('place', Place)

    @property
    def is_retweet(self) -> bool:
        return bool(self._get('retweeted_status'))

    @property
    def retweeted_status(self) -> Optional['Tweet']:
        value = self._get('retweeted_status')
        return Tweet(value, self.client) if value else None

    @property
    def is_protected(self) -> bool:
        return bool(self._get('protected') or self.user.protected)

    def is_mention(self, username: str, current_username: str) -> bool:
        """True if ``username`` appears in the text and the author is not ``current_username``."""
        return username in (self.text or '') and self.user.username != current_username

    # --- actions ---

    def refresh(self, on_success=None, on_error=None):
        if not self.client:
            return None
        return self.client.get_tweet_by_id(self.id, on_success, on_error)

    def get_user(self, on_success=None, on_error=None):
        if not self.client:
            return None
        return self.client.get_user_by_id(self.user.id, on_success, on_error)

    def get_replies(self, on_success=None, on_error=None):
        if not self.client:
            return None
        return self.client.get_replies(self.user.username, self.id, on_success, on_error)

    def reply(self, text: str, on_success=None, on_error=None):
        if not self.client:
            return None
        return self.client.post_new_reply_to_tweet(text, self.id, on_success, on_error)

    def reply_with_media(self, text: str, media_ids, on_success=None, on_error=None):
        if not self.client:
            return None
        return self.client.post_new_reply_to_tweet_with_media(text, media_ids, self.id, on_success, on_error)

    def retweet(self, on_success=None, on_error=None):
        if self.is_protected or not self.client:
            return None
        return self.client.retweet(self.id, on_success, on_error)

    def unretweet(self, on_success=None, on_error=None):
        if self.is_protected or not self.client:
            return None
        return self.client.unretweet(self.id, on_success, on_error)

    def favorite(self, on_success=None, on_error=None):
        if self.is_protected or not self.client:
            return None
        return self.client.favorite(self.id, on_success, on_error)

    def unfavorite(self, on_success=None, on_error=None):
        if self.is_protected or not self.client:
            return None
        return self.client.unfavorite(self.id, on_success, on_error)

    def delete(self, on_success=None, on_error=None):
        if not self.client:
            return None
        return self.client.delete_tweet(self.id, on_success, on_error)

    def send_reply_as_direct_message(self, text: str, on_success=None, on_error=None):
        if not self.client:
            return None
        return self.client.send_new_direct_message(self.user.id, text, on_success, on_error)

    def __str__(self):
        return str(self.text)
