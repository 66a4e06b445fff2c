"""Tests for the streaming connection."""

from conftest import Recorder, RecordingStream

from twitterkit.auth import Auth
from twitterkit.connection import StreamConnection

STREAM_URL = "https://stream.example.com/1.1/statuses/filter.json"

EVENTS = (
    "connect", "connected", "message", "tweet", "delete", "limit", "scrub_geo", "friends",
    "direct_message", "warning", "user_event", "follow", "unknown_user_event", "disconnect",
    "error", "reconnect",
)


def make_connection(**kwargs):
    connection = StreamConnection(STREAM_URL, name="test", stream_factory=RecordingStream, **kwargs)
    log = []
    for event in EVENTS:
        connection.on(event, Recorder(log, event))
    return connection, log


def names(log):
    return [name for name, _ in log]


def test_tweet_is_dispatched_after_message():
    """Test every object fires message, then its classified event."""
    connection, log = make_connection()

    connection._dispatch({"text": "hi"})

    assert names(log) == ["message", "tweet"]


def test_full_text_is_a_tweet():
    """Test extended-mode objects are recognised as tweets."""
    connection, log = make_connection()
    connection._dispatch({"full_text": "hi"})
    assert names(log) == ["message", "tweet"]


def test_notice_keys():
    """Test notices are routed by their top-level key."""
    connection, log = make_connection()

    connection._dispatch({"delete": {"status": {}}})
    connection._dispatch({"limit": {"track": 1}})
    connection._dispatch({"friends_str": ["1"]})
    connection._dispatch({"direct_message": {}})
    connection._dispatch({"warning": {}})

    assert [n for n in names(log) if n != "message"] == [
        "delete", "limit", "friends", "direct_message", "warning",
    ]


def test_user_events():
    """Test user events fire user_event and then their own or the unknown name."""
    connection, log = make_connection()

    connection._dispatch({"event": "follow"})
    connection._dispatch({"event": "poke"})

    assert names(log) == [
        "message", "user_event", "follow",
        "message", "user_event", "unknown_user_event",
    ]


def test_unclassified_objects_only_fire_message():
    """Test an object with no known key only reaches message subscribers."""
    connection, log = make_connection()
    connection._dispatch({"something": "else"})
    connection._dispatch([1, 2])
    assert names(log) == ["message", "message"]


def test_start_opens_a_threaded_tweepy_connection():
    """Test GET connections pass their parameters as the query string."""
    connection, log = make_connection(params={"track": "python", "stall_warnings": True})

    connection.start()

    args, kwargs = connection._stream.connect_args
    assert args == ("GET", STREAM_URL)
    assert kwargs["params"] == {"track": "python", "stall_warnings": "true"}
    assert kwargs["auth"] is None
    assert connection.is_running
    assert log == [("connect", ({"method": "GET", "url": STREAM_URL,
                                 "params": {"track": "python", "stall_warnings": "true"}},))]


def test_post_sends_params_in_the_body():
    """Test POST connections send their parameters as the form body."""
    connection, _ = make_connection(method="POST", params=lambda: {"track": "a,b"})

    connection.start()

    args, kwargs = connection._stream.connect_args
    assert args == ("POST", STREAM_URL)
    assert kwargs["body"] == {"track": "a,b"}
    assert "params" not in kwargs


def test_requests_are_signed_with_the_credentials():
    """Test the tweepy OAuth 1.0a signer is handed to the stream."""
    auth = Auth("ck", "cs", "at", "ats")
    connection, _ = make_connection(auth=auth)

    connection.start()

    _, kwargs = connection._stream.connect_args
    assert kwargs["auth"].client.client_key == "ck"


def test_connected_is_emitted_on_connect():
    """Test tweepy's connect callback becomes a connected event."""
    connection, log = make_connection()
    connection.start()

    connection._stream.on_connect()

    assert names(log) == ["connect", "connected"]
    assert log[1][1][0]["url"] == STREAM_URL


def test_received_lines_are_dispatched():
    """Test raw lines from tweepy are decoded and classified."""
    connection, log = make_connection()
    connection.start()

    connection._stream.on_data(b'{"text": "hello"}')
    connection._stream.on_data(b'{"delete": {"status": {"id_str": "1"}}}')

    assert names(log) == ["connect", "message", "tweet", "message", "delete"]


def test_undecodable_lines_do_not_end_the_stream(caplog):
    """Test bad JSON and invalid UTF-8 between two tweets are skipped and logged."""
    connection, log = make_connection()
    connection.start()
    stream = connection._stream

    stream.on_data(b'{"text": "first"}')
    stream.on_data(b"\xff\xfe not utf-8")
    stream.on_data(b"not json")
    stream.on_data(b'{"text": "second"}')

    tweets = [args[0]["text"] for name, args in log if name == "tweet"]
    assert tweets == ["first", "second"]
    assert connection.is_running
    assert caplog.text.count("Skipping undecodable line") == 2


def test_disconnect_stops_the_connection():
    """Test a disconnect notice is emitted and stops the tweepy stream."""
    connection, log = make_connection()
    connection.start()
    stream = connection._stream
    assert connection.is_running

    stream.on_data(b'{"disconnect": {"code": 7, "reason": "duplicate"}}')

    assert names(log) == ["connect", "message", "disconnect"]
    assert not connection.is_running
    assert not stream.running


def test_http_error_is_reported_then_reconnect():
    """Test a rejected connection emits error, then a reconnect notice with the status."""
    connection, log = make_connection()
    connection.start()

    connection._stream.on_request_error(420)

    assert names(log) == ["connect", "error", "reconnect"]
    error = log[1][1][0]
    request, status_code, interval_ms = log[2][1]
    assert error["status_code"] == 420
    assert request["url"] == STREAM_URL
    assert status_code == 420
    # tweepy owns the wait
    assert interval_ms is None


def test_connection_error_is_reported_then_reconnect():
    """Test network failures emit error, then a reconnect notice without a status."""
    connection, log = make_connection()
    connection.start()

    connection._stream.on_connection_error()

    assert names(log) == ["connect", "error", "reconnect"]
    assert log[2][1][1] is None


def test_no_reconnect_notice_once_stopped():
    """Test an error reported while tweepy is shutting down emits no reconnect."""
    connection, log = make_connection()
    connection.start()
    stream = connection._stream
    stream.running = False

    stream.on_request_error(401)

    assert names(log) == ["connect", "error"]


def test_exception_ending_the_stream_is_an_error():
    """Test exceptions raised inside tweepy's loop are emitted as errors."""
    connection, log = make_connection()
    connection.start()
    failure = RuntimeError("boom")

    connection._stream.on_exception(failure)

    assert log[-1] == ("error", (failure,))


def test_stopped_stream_callbacks_are_ignored():
    """Test late callbacks from a stopped stream emit nothing."""
    connection, log = make_connection()
    connection.start()
    stream = connection._stream
    connection.stop()
    stream.running = True

    stream.on_connect()
    stream.on_data(b'{"text": "late"}')
    stream.on_request_error(500)

    assert names(log) == ["connect"]
    assert not connection.is_running
    assert not stream.running


def test_restart_abandons_the_previous_stream():
    """Test start() while running disconnects the old tweepy stream and reads params again."""
    tracks = ["a"]
    connection, log = make_connection(method="POST", params=lambda: {"track": ",".join(tracks)})
    connection.start()
    old = connection._stream

    tracks.append("b")
    connection.start()

    assert not old.running
    assert connection._stream is not old
    assert connection._stream.connect_args[1]["body"] == {"track": "a,b"}
    old.on_data(b'{"text": "stale"}')
    assert "tweet" not in names(log)


def test_stop_twice_is_harmless():
    """Test stop() without a running stream does nothing."""
    connection, _ = make_connection()
    connection.stop()
    connection.start()
    connection.stop()
    connection.stop()
    assert not connection.is_running
