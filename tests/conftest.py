"""Shared fakes: no test touches the network or starts a real thread."""

import json

import pytest
import requests

from twitterkit.client import TwitterClient
from twitterkit.connection import TweepyStream
from twitterkit.events import EventRegistry


class FakeResponse:
    """Stand-in for the ``requests.Response`` tweepy errors carry."""

    def __init__(self, status_code=200, body=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._body = body

    @property
    def text(self):
        return "" if self._body is None else json.dumps(self._body)

    def json(self):
        if self._body is None:
            raise requests.exceptions.JSONDecodeError("No JSON body", "", 0)
        return self._body


class FakeApi:
    """Stand-in for ``tweepy.API``: records calls, replays queued results or raises queued errors."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            result = self.results.pop(0) if self.results else {}
            if isinstance(result, Exception):
                raise result
            return result

        return method


class RecordingStream(TweepyStream):
    """tweepy stream that records the connect call instead of starting a thread."""

    def _threaded_connect(self, *args, **kwargs):
        self.connect_args = (args, kwargs)
        self.running = True


class FakeScheduler:
    """Records jobs instead of running them."""

    def __init__(self):
        self.running = False
        self.jobs = {}

    def start(self):
        self.running = True

    def shutdown(self, wait=True):
        self.running = False

    def add_job(self, func, trigger=None, **kwargs):
        job = dict(kwargs, func=func, trigger=trigger)
        self.jobs[kwargs["id"]] = job
        return job


class FakeConnection:
    """Implements the ``on``/``start``/``stop`` surface a StreamAdapter binds to."""

    def __init__(self, params=None):
        self.params = params
        self.events = EventRegistry(name="fake", raise_errors=True)
        self.started = 0
        self.stopped = 0
        self.connected_with = []

    def on(self, event, handler):
        self.events.register(event, handler)

    def emit(self, event, *args):
        return self.events.fire(event, *args)

    def start(self):
        self.started += 1
        self.connected_with.append(self.params() if callable(self.params) else self.params)
        return self

    def stop(self):
        self.stopped += 1
        return self


class FakeRest:
    """Records ``tweepy.API`` calls and replays queued ``(error, data)`` results."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def call(self, method, *args, **kwargs):
        self.calls.append((method, args, kwargs))
        if self.results:
            return self.results.pop(0)
        return None, {}


class Recorder:
    """Callable that remembers every call."""

    def __init__(self, log=None, name=None):
        self.calls = []
        self.log = log
        self.name = name

    def __call__(self, *args):
        self.calls.append(args)
        if self.log is not None:
            self.log.append((self.name, args))


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def rest():
    return FakeRest()


@pytest.fixture
def connections():
    """Every FakeConnection built by the ``client`` fixture, keyed by stream name."""
    return {}


@pytest.fixture
def client(rest, connections):
    def factory(url, params, method, name):
        connection = FakeConnection(params)
        connection.url = url
        connection.method = method
        connections[name] = connection
        return connection

    return TwitterClient(rest=rest, connection_factory=factory)


@pytest.fixture
def tweet_payload():
    return {
        "id_str": "100",
        "text": "hello world",
        "in_reply_to_status_id_str": None,
        "user": {"id_str": "7", "name": "Ada", "screen_name": "ada", "protected": False},
        "entities": {"hashtags": [{"text": "py"}], "user_mentions": [], "symbols": [], "urls": []},
    }


@pytest.fixture
def retweet_payload(tweet_payload):
    return {
        "id_str": "101",
        "text": "RT @ada: hello world",
        "user": {"id_str": "8", "name": "Bob", "screen_name": "bob"},
        "retweeted_status": tweet_payload,
        "entities": {"hashtags": [], "user_mentions": [], "symbols": [], "urls": []},
    }
