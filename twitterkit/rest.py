"""
REST calls to the Twitter v1.1 API through ``tweepy.API``.

Every call returns an ``(error, data)`` pair instead of raising, so the
client layer can route failures to an error callback.
"""
from typing import Any, Optional, Tuple

import tweepy
from tweepy.parsers import JSONParser

from .auth import Auth
from .config import Config
from .logger import logger
from .utils import encode_bools

Result = Tuple[Optional[tweepy.TweepyException], Any]


class RestClient:
    """Runs ``tweepy.API`` methods and returns the raw JSON they decode."""

    def __init__(self, auth: Optional[Auth] = None, timeout: Optional[float] = None,
                 api: Optional[tweepy.API] = None):
        self.auth = auth
        self.timeout = timeout if timeout is not None else Config.TWITTER_TIMEOUT
        self.api = api or tweepy.API(
            auth.handler() if auth else None,
            parser=JSONParser(),
            timeout=self.timeout,
            host=Config.TWITTER_API_HOST,
            upload_host=Config.TWITTER_UPLOAD_HOST,
        )

    def call(self, method: str, *args, **kwargs) -> Result:
        """Perform one call.

        Args:
            method: ``tweepy.API`` method name, e.g. ``get_status``
            *args: Positional arguments of that method
            **kwargs: Keyword arguments; None values are dropped

        Returns:
            ``(None, decoded_json)`` on success, ``(error, None)`` otherwise
        """
        params = encode_bools({k: v for k, v in kwargs.items() if v is not None})
        logger.debug('API %s %s', method, params)
        try:
            return None, getattr(self.api, method)(*args, **params)
        except tweepy.TweepyException as e:
            logger.debug('API %s failed: %s', method, e)
            return e, None
