"""Tests for the event registry."""

import pytest

from twitterkit.events import EventRegistry, TwitterEvent


def test_fire_without_subscribers_returns_false():
    """Firing a name nobody registered reports False and calls nothing."""
    registry = EventRegistry()
    assert registry.fire("E", 1) is False


def test_fire_after_register_returns_true():
    """Test fire returns True once a subscriber exists."""
    registry = EventRegistry()
    registry.register("E", lambda *args: None)
    assert registry.fire("E") is True


def test_subscribers_run_in_registration_order():
    """Test subscribers are invoked in the order they registered."""
    registry = EventRegistry()
    order = []
    registry.register("E", lambda x: order.append(("A", x)))
    registry.register("E", lambda x: order.append(("B", x)))
    registry.register("E", lambda x: order.append(("C", x)))

    registry.fire("E", 1)

    assert order == [("A", 1), ("B", 1), ("C", 1)]


def test_each_registration_is_called():
    """The same callable registered twice runs twice per firing."""
    registry = EventRegistry()
    calls = []

    def subscriber(value):
        calls.append(value)

    registry.register("E", subscriber)
    registry.register("E", subscriber)
    registry.fire("E", "x")

    assert calls == ["x", "x"]
    assert registry.listener_count("E") == 2


def test_events_are_isolated():
    """Test a subscriber of one name never sees another name."""
    registry = EventRegistry()
    seen = []
    registry.register("A", seen.append)

    assert registry.fire("B", 1) is False
    assert seen == []


def test_payload_is_passed_through_unchanged():
    """The registry hands subscribers the same object it was given."""
    registry = EventRegistry()
    received = []
    registry.register(TwitterEvent.TWEET, received.append)
    payload = {"text": "hello"}

    assert registry.fire(TwitterEvent.TWEET, payload) is True
    assert received[0] is payload


def test_tweet_reaches_its_subscriber_once():
    """Test a TWEET firing reaches its subscriber once and an OTHER firing does not."""
    registry = EventRegistry()
    calls = []
    registry.register("TWEET", lambda payload: calls.append(payload))

    assert registry.fire("TWEET", {"text": "hello"}) is True
    assert registry.fire("OTHER") is False

    assert calls == [{"text": "hello"}]


def test_enum_and_string_keys_are_equivalent():
    """Test TwitterEvent members and their string values address the same list."""
    registry = EventRegistry()
    received = []
    registry.register(TwitterEvent.TWEET, received.append)

    assert registry.fire("TWEET", 1) is True
    assert received == [1]
    assert registry.event_names() == ["TWEET"]
    assert str(TwitterEvent.TWEET) == "TWEET"


def test_multiple_arguments():
    """Test positional arguments reach the subscriber as given."""
    registry = EventRegistry()
    received = []
    registry.register(TwitterEvent.RECONNECT, lambda *args: received.append(args))

    registry.fire(TwitterEvent.RECONNECT, "req", "resp", 250)

    assert received == [("req", "resp", 250)]


def test_unregister():
    """Test unregister removes one registration and reports whether it found one."""
    registry = EventRegistry()
    calls = []
    registry.register("E", calls.append)

    assert registry.unregister("E", calls.append) is True
    assert registry.unregister("E", calls.append) is False
    assert registry.unregister("missing", calls.append) is False
    assert registry.listener_count("E") == 0

    # the name stays known once registered
    assert registry.fire("E", 1) is True
    assert calls == []


def test_failing_subscriber_does_not_stop_the_others(caplog):
    """Test the default policy logs a failure and keeps going."""
    failures = []
    registry = EventRegistry(on_error=lambda key, sub, exc: failures.append((key, exc)))
    calls = []

    def broken(value):
        raise RuntimeError("boom")

    registry.register("E", broken)
    registry.register("E", calls.append)

    assert registry.fire("E", 1) is True
    assert calls == [1]
    assert failures[0][0] == "E"
    assert isinstance(failures[0][1], RuntimeError)
    assert "failed on E" in caplog.text


def test_raise_errors_propagates_and_skips_the_rest():
    """Test raise_errors=True lets the first exception out of fire."""
    registry = EventRegistry(raise_errors=True)
    calls = []

    def broken(value):
        raise RuntimeError("boom")

    registry.register("E", broken)
    registry.register("E", calls.append)

    with pytest.raises(RuntimeError):
        registry.fire("E", 1)
    assert calls == []


def test_subscriber_may_register_during_fire():
    """A subscriber added while firing runs from the next firing on."""
    registry = EventRegistry()
    calls = []

    def first(value):
        calls.append(("first", value))
        registry.register("E", lambda v: calls.append(("late", v)))

    registry.register("E", first)
    registry.fire("E", 1)
    assert calls == [("first", 1)]

    registry.unregister("E", first)
    registry.fire("E", 2)
    assert calls == [("first", 1), ("late", 2)]
