"""
twitterkit - Twitter API Client
A Python client for interacting with Twitter's REST and Stream APIs.
"""

__version__ = "0.1.0"
__author__ = "Developer"

from .auth import Auth
from .client import TwitterClient
from .connection import StreamConnection
from .events import EventRegistry, TwitterEvent
from .stream import FilterStreamAdapter, StreamAdapter

__all__ = [
    "Auth",
    "EventRegistry",
    "FilterStreamAdapter",
    "StreamAdapter",
    "StreamConnection",
    "TwitterClient",
    "TwitterEvent",
]
