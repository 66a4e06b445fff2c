"""
Authentication Module
Hold the OAuth 1.0a user-context credentials and sign requests with them.
"""

from typing import Optional

import tweepy

from .config import Config


class Auth:
    """Handle Twitter API authentication."""

    def __init__(self, consumer_key: Optional[str] = None, consumer_secret: Optional[str] = None,
                 access_token: Optional[str] = None, access_token_secret: Optional[str] = None):
        """
        Initialize authentication.

        Args:
            consumer_key: Twitter API Key (or from env TWITTER_CONSUMER_KEY)
            consumer_secret: Twitter API Secret (or from env TWITTER_CONSUMER_SECRET)
            access_token: Twitter Access Token (or from env TWITTER_ACCESS_TOKEN)
            access_token_secret: Twitter Access Secret (or from env TWITTER_ACCESS_TOKEN_SECRET)
        """
        self.consumer_key = consumer_key or Config.TWITTER_CONSUMER_KEY
        self.consumer_secret = consumer_secret or Config.TWITTER_CONSUMER_SECRET
        self.access_token = access_token or Config.TWITTER_ACCESS_TOKEN
        self.access_token_secret = access_token_secret or Config.TWITTER_ACCESS_TOKEN_SECRET

        if not all([self.consumer_key, self.consumer_secret, self.access_token, self.access_token_secret]):
            raise ValueError("Missing required authentication credentials")

    @classmethod
    def from_keys(cls, keys: Optional[dict]) -> Optional["Auth"]:
        """
        Build from a ``consumer_key``/``consumer_secret``/``access_token``/
        ``access_token_secret`` mapping.

        Returns None when ``keys`` is empty, which gives a connection-less client.
        """
        if not keys:
            return None
        return cls(
            consumer_key=keys.get("consumer_key"),
            consumer_secret=keys.get("consumer_secret"),
            access_token=keys.get("access_token"),
            access_token_secret=keys.get("access_token_secret"),
        )

    @classmethod
    def from_env(cls) -> Optional["Auth"]:
        """Build from Config, or None if any credential is missing."""
        try:
            return cls()
        except ValueError:
            return None

    def get_credentials(self) -> dict:
        """Get authentication credentials."""
        return {
            "consumer_key": self.consumer_key,
            "consumer_secret": self.consumer_secret,
            "access_token": self.access_token,
            "access_token_secret": self.access_token_secret,
        }

    def handler(self) -> tweepy.OAuth1UserHandler:
        """tweepy OAuth 1.0a user-context handler for these credentials."""
        return tweepy.OAuth1UserHandler(
            self.consumer_key,
            self.consumer_secret,
            self.access_token,
            self.access_token_secret,
        )

    def apply_auth(self):
        """Request signer for the streaming connection."""
        return self.handler().apply_auth()
