"""
Twitter API Client
Main client for interacting with Twitter's REST and Stream APIs.
"""
from typing import Any, Callable, List, Optional

import tweepy

from .auth import Auth
from .config import Config
from .connection import StreamConnection
from .data import (
    Connections,
    DataError,
    MessageCreateEvent,
    SearchMetadata,
    StandardSearch,
    Tweet,
    User,
)
from .events import EventKey
from .logger import logger
from .rest import RestClient, Result
from .stream import FilterStreamAdapter, StreamAdapter
from .utils import as_list, merge_params, validate_tweet_text

Callback = Optional[Callable[..., Any]]


class TwitterClient:
    """Twitter API Client for REST and Stream APIs.

    REST methods take optional ``on_success``/``on_error`` callbacks and also
    return the built result (``None`` on error). Without ``on_error`` a
    failed call is only logged.
    """

    def __init__(self, keys: Optional[dict] = None, auth: Optional[Auth] = None,
                 timeout: Optional[float] = None, rest: Optional[RestClient] = None,
                 connection_factory: Optional[Callable[..., StreamConnection]] = None):
        """
        Initialize Twitter API client.

        Args:
            keys: ``consumer_key``, ``consumer_secret``, ``access_token``,
                ``access_token_secret``. Without keys or ``auth`` the client
                is connection-less: tweepy rejects every call with
                "Authentication required".
            auth: Prebuilt credentials, takes precedence over ``keys``
            timeout: Request timeout in seconds (default Config.TWITTER_TIMEOUT)
            rest: REST transport to use instead of building one
            connection_factory: ``(url, params, method, name) -> StreamConnection``
        """
        self.auth = auth or Auth.from_keys(keys)
        self.timeout = timeout if timeout is not None else Config.TWITTER_TIMEOUT
        self.rest = rest or RestClient(auth=self.auth, timeout=self.timeout)
        self._connection_factory = connection_factory or self._new_connection

        self.user_stream = StreamAdapter(
            lambda: self._connection_factory(
                f"{Config.TWITTER_USER_STREAM_URL}/user.json", {}, 'GET', 'user-stream'),
            client=self,
            name='user-stream',
        )
        self.filter_stream = FilterStreamAdapter(
            lambda params: self._connection_factory(
                f"{Config.TWITTER_STREAM_URL}/statuses/filter.json", params, 'POST', 'filter-stream'),
            client=self,
            name='filter-stream',
        )

    def _new_connection(self, url, params, method, name) -> StreamConnection:
        return StreamConnection(url, params=params, method=method, auth=self.auth, name=name)

    def close(self) -> None:
        """Stop both streams."""
        self.user_stream.stop()
        self.filter_stream.stop()

    # --- response routing ---

    def _respond(self, result: Result, on_success: Callback, on_error: Callback,
                 build: Optional[Callable[[Any], tuple]] = None):
        """
        Route one ``(error, data)`` pair.

        On error the exception is wrapped in ``DataError`` and given to
        ``on_error``. On success ``build(data)`` produces the callback
        arguments; the single argument (or the tuple) is returned.
        """
        error, data = result
        if error is not None:
            wrapped = DataError(error)
            if on_error:
                on_error(wrapped)
            else:
                logger.warning('Twitter request failed with no error callback: %s', wrapped)
            return None

        args = build(data) if build else (data,)
        if on_success:
            on_success(*args)
        return args[0] if len(args) == 1 else args

    def _tweets(self, data) -> tuple:
        return ([Tweet(t, self) for t in data or []],)

    def _tweet(self, data) -> tuple:
        return (Tweet(data, self),)

    # --- account / users ---

    def get_current_user(self, on_success: Callback = None, on_error: Callback = None):
        result = self.rest.call('verify_credentials', include_entities=True, include_email=True)
        return self._respond(result, on_success, on_error, lambda d: (User(d),))

    def get_user_by_id(self, user_id, on_success: Callback = None, on_error: Callback = None):
        result = self.rest.call('get_user', user_id=user_id, tweet_mode='extended', include_entities=True)
        return self._respond(result, on_success, on_error, lambda d: (User(d),))

    def get_user_by_username(self, username: str, on_success: Callback = None, on_error: Callback = None):
        result = self.rest.call('get_user', screen_name=username, tweet_mode='extended', include_entities=True)
        return self._respond(result, on_success, on_error, lambda d: (User(d),))

    def get_user_connections_by_id(self, user_id, on_success: Callback = None, on_error: Callback = None,
                                   **params):
        result = self.rest.call('lookup_friendships', **merge_params(
            {'user_id': as_list(user_id) or None}, params))
        return self._respond(result, on_success, on_error, lambda d: (Connections(d),))

    def get_user_connections_by_username(self, username: str, on_success: Callback = None,
                                         on_error: Callback = None):
        return self.get_user_connections_by_id(None, on_success, on_error, screen_name=as_list(username))

    # --- search ---

    def search_tweets(self, search: StandardSearch, on_success: Callback = None, on_error: Callback = None):
        """Success callback receives ``(tweets, SearchMetadata)``."""
        result = self.rest.call('search_tweets', **search.to_params())
        return self._respond(result, on_success, on_error, lambda d: (
            [Tweet(t, self) for t in d.get('statuses') or []],
            SearchMetadata(d.get('search_metadata')),
        ))

    def get_tweets_by_search(self, query: str, on_success: Callback = None, on_error: Callback = None):
        return self.search_tweets(StandardSearch(query), on_success, on_error)

    def get_replies(self, to_username: str, to_tweet_id, on_success: Callback = None,
                    on_error: Callback = None):
        """Recent tweets addressed to ``to_username`` that reply to ``to_tweet_id``."""
        search = StandardSearch(f'to:{to_username}')
        search.since_id = to_tweet_id
        result = self.rest.call('search_tweets', **search.to_params())
        return self._respond(result, on_success, on_error, lambda d: (
            self._replies_to(self._tweets(d.get('statuses'))[0], to_tweet_id),))

    @staticmethod
    def _replies_to(tweets: List[Tweet], tweet_id) -> List[Tweet]:
        # ids arrive as *_str fields
        return [tweet for tweet in tweets if tweet.in_reply_to_status_id == str(tweet_id)]

    # --- tweets ---

    def get_tweet_by_id(self, tweet_id, on_success: Callback = None, on_error: Callback = None):
        result = self.rest.call('get_status', tweet_id, include_my_retweet=True, tweet_mode='extended',
                                include_entities=True)
        return self._respond(result, on_success, on_error, self._tweet)

    def get_tweets_by_ids(self, tweet_ids, on_success: Callback = None, on_error: Callback = None):
        """``tweet_ids`` may be a single id or a list of ids."""
        result = self.rest.call('lookup_statuses', as_list(tweet_ids), include_entities=True,
                                tweet_mode='extended')
        return self._respond(result, on_success, on_error, self._tweets)

    def get_related_tweets_from_user(self, username: str, tweet_id, on_success: Callback = None,
                                     on_error: Callback = None):
        """Tweets in ``username``'s timeline that reply to ``tweet_id``."""
        result = self.rest.call('user_timeline', **self._timeline_params(
            None, False, {'screen_name': username}))
        return self._respond(result, on_success, on_error, lambda d: (
            self._replies_to(self._tweets(d)[0], tweet_id),))

    def get_favorites_list(self, on_success: Callback = None, on_error: Callback = None, **params):
        result = self.rest.call('get_favorites', **merge_params({
            'count': 200, 'include_entities': True, 'tweet_mode': 'extended',
        }, params))
        return self._respond(result, on_success, on_error, self._tweets)

    def get_favorites_list_by_username(self, username: str, on_success: Callback = None,
                                       on_error: Callback = None):
        return self.get_favorites_list(on_success, on_error, screen_name=username)

    def get_favorites_list_by_id(self, user_id, on_success: Callback = None, on_error: Callback = None):
        return self.get_favorites_list(on_success, on_error, user_id=user_id)

    def get_retweets_of_me(self, on_success: Callback = None, on_error: Callback = None):
        result = self.rest.call('get_retweets_of_me', include_entities=True, include_user_entities=True,
                                count=100, trim_user=True, tweet_mode='extended')
        return self._respond(result, on_success, on_error, self._tweets)

    def get_mentions_timeline(self, on_success: Callback = None, on_error: Callback = None, **params):
        result = self.rest.call('mentions_timeline', **merge_params({
            'tweet_mode': 'extended', 'include_entities': True, 'count': 200,
        }, params))
        return self._respond(result, on_success, on_error, self._tweets)

    def get_home_timeline(self, on_success: Callback = None, on_error: Callback = None,
                          include_retweets: bool = False, **params):
        """The home timeline endpoint has no ``include_rts``; retweets are dropped here."""
        result = self.rest.call('home_timeline', **merge_params({
            'count': 200,
            'trim_user': True,
            'exclude_replies': False,
            'tweet_mode': 'extended',
            'include_entities': True,
        }, params))
        return self._respond(result, on_success, on_error, lambda d: ([
            tweet for tweet in self._tweets(d)[0] if include_retweets or not tweet.is_retweet
        ],))

    @staticmethod
    def _timeline_params(user_id, include_retweets: bool, params: dict) -> dict:
        return merge_params({
            'user_id': user_id,
            'count': 200,
            'trim_user': True,
            'exclude_replies': False,
            'include_rts': include_retweets,
            'tweet_mode': 'extended',
        }, params)

    def get_user_timeline_by_id(self, user_id, on_success: Callback = None, on_error: Callback = None,
                                include_retweets: bool = False, **params):
        result = self.rest.call('user_timeline', **self._timeline_params(user_id, include_retweets, params))
        return self._respond(result, on_success, on_error, self._tweets)

    def get_user_timeline_by_username(self, username: str, on_success: Callback = None,
                                      on_error: Callback = None, include_retweets: bool = False):
        return self.get_user_timeline_by_id(None, on_success, on_error, include_retweets,
                                            screen_name=username)

    def post_new_tweet(self, text: str, on_success: Callback = None, on_error: Callback = None, **params):
        if not validate_tweet_text(text):
            logger.warning('Tweet text is empty or longer than 280 characters; Twitter will likely reject it')
        result = self.rest.call('update_status', text, **params)
        return self._respond(result, on_success, on_error, self._tweet)

    def post_new_reply_to_tweet(self, text: str, to_tweet_id, on_success: Callback = None,
                                on_error: Callback = None, **params):
        return self.post_new_tweet(text, on_success, on_error, **merge_params({
            'in_reply_to_status_id': to_tweet_id,
            'auto_populate_reply_metadata': True,
        }, params))

    def post_new_tweet_with_media(self, text: str, media_ids, on_success: Callback = None,
                                  on_error: Callback = None, **params):
        return self.post_new_tweet(text, on_success, on_error,
                                   **merge_params({'media_ids': as_list(media_ids)}, params))

    def post_new_reply_to_tweet_with_media(self, text: str, media_ids, to_tweet_id,
                                           on_success: Callback = None, on_error: Callback = None):
        return self.post_new_tweet_with_media(text, media_ids, on_success, on_error,
                                              in_reply_to_status_id=to_tweet_id,
                                              auto_populate_reply_metadata=True)

    def _tweet_action(self, method: str, tweet_id, on_success: Callback, on_error: Callback, **params):
        result = self.rest.call(method, tweet_id, **params)
        return self._respond(result, on_success, on_error, self._tweet)

    def retweet(self, tweet_id, on_success: Callback = None, on_error: Callback = None):
        return self._tweet_action('retweet', tweet_id, on_success, on_error, tweet_mode='extended')

    def unretweet(self, tweet_id, on_success: Callback = None, on_error: Callback = None):
        return self._tweet_action('unretweet', tweet_id, on_success, on_error, tweet_mode='extended')

    def favorite(self, tweet_id, on_success: Callback = None, on_error: Callback = None):
        return self._tweet_action('create_favorite', tweet_id, on_success, on_error, tweet_mode='extended')

    def unfavorite(self, tweet_id, on_success: Callback = None, on_error: Callback = None):
        return self._tweet_action('destroy_favorite', tweet_id, on_success, on_error, tweet_mode='extended')

    def delete_tweet(self, tweet_id, on_success: Callback = None, on_error: Callback = None):
        return self._tweet_action('destroy_status', tweet_id, on_success, on_error)

    # --- media ---

    def upload_media_image(self, path: str, alt_text: Optional[str] = None, on_success: Callback = None,
                           on_error: Callback = None):
        """
        Upload an image and attach alt text to it.

        Success callback receives ``(media_id, upload_response)``. A file
        that cannot be read, or a reply without a media id, goes to
        ``on_error``.
        """
        try:
            with open(path, 'rb') as fh:
                error, upload = self.rest.call('media_upload', path, file=fh)
        except OSError as e:
            error, upload = e, None

        if error is None and not (upload or {}).get('media_id_string'):
            error, upload = tweepy.TweepyException(f'Upload of {path} returned no media id'), None
        if error is None and alt_text:
            error, _ = self.rest.call('create_media_metadata', upload['media_id_string'], alt_text)
        return self._respond((error, upload), on_success, on_error,
                             lambda d: (d['media_id_string'], d))

    # --- direct messages ---

    def send_new_direct_message(self, to_user_id, text: str, on_success: Callback = None,
                                on_error: Callback = None, buttons=None, quick_reply=None,
                                media_id=None):
        """
        Send a direct message, optionally with CTA buttons, quick reply options
        and one media attachment.
        """
        params = {}
        if media_id:
            params['attachment_type'] = 'media'
            params['attachment_media_id'] = media_id
        if quick_reply is not None and quick_reply.to_quick_reply():
            params['quick_reply_options'] = quick_reply.options
        if buttons is not None and buttons.size:
            params['ctas'] = buttons.to_ctas()

        result = self.rest.call('send_direct_message', to_user_id, text, **params)
        return self._respond(result, on_success, on_error, self._message_event)

    def get_direct_message(self, message_id, on_success: Callback = None, on_error: Callback = None):
        result = self.rest.call('get_direct_message', message_id)
        return self._respond(result, on_success, on_error, self._message_event)

    @staticmethod
    def _message_event(data) -> tuple:
        return (MessageCreateEvent((data or {}).get('event')),)

    def delete_direct_message(self, message_id, on_success: Callback = None, on_error: Callback = None):
        result = self.rest.call('delete_direct_message', message_id)
        return self._respond(result, on_success, on_error)

    # --- streams ---

    def register_user_stream_event(self, event: EventKey, subscriber: Callable) -> None:
        self.user_stream.register(event, subscriber)

    def unregister_user_stream_event(self, event: EventKey, subscriber: Callable) -> bool:
        return self.user_stream.unregister(event, subscriber)

    def register_filter_stream_event(self, event: EventKey, subscriber: Callable) -> None:
        self.filter_stream.register(event, subscriber)

    def unregister_filter_stream_event(self, event: EventKey, subscriber: Callable) -> bool:
        return self.filter_stream.unregister(event, subscriber)

    def start_user_stream(self):
        return self.user_stream.start()

    def stop_user_stream(self):
        return self.user_stream.stop()

    def start_filter_stream(self):
        return self.filter_stream.start()

    def stop_filter_stream(self):
        return self.filter_stream.stop()

    def restart_filter_stream(self):
        """Reconnect the filter stream so changed tracks take effect. Returns the connection."""
        return self.filter_stream.restart()

    def add_tracks_to_filter_stream(self, *tracks) -> None:
        self.filter_stream.add_tracks(*tracks)

    def reset_tracks_of_filter_stream(self) -> None:
        self.filter_stream.reset_tracks()

    @property
    def filter_stream_tracks(self) -> List[str]:
        return self.filter_stream.tracks
