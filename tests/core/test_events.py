"""Tests for Alteration records and the change channel."""

import pytest

from sconf.core.events import CHANGE_EVENT, Alteration, ChangeChannel, change_event


class TestAlteration:
    def test_key_is_read_only(self):
        alteration = Alteration("fruit", "pear")
        with pytest.raises(AttributeError):
            alteration.key = "animal"

    def test_value_is_reassignable(self):
        alteration = Alteration("fruit", "pear")
        alteration.value = "banana"
        assert alteration.value == "banana"

    def test_matches(self):
        alteration = Alteration("fruit", "pear")
        assert alteration.matches("fruit")
        assert not alteration.matches("animal")

    def test_equality(self):
        assert Alteration("fruit", "pear") == Alteration("fruit", "pear")
        assert Alteration("fruit", "pear") != Alteration("fruit", "apple")


def test_change_event_name():
    assert change_event("fruit") == "change:fruit"


class TestChangeChannel:
    def test_batch_event_receives_all_alterations(self):
        channel = ChangeChannel()
        received = []
        channel.on(CHANGE_EVENT, received.append)

        channel.publish([Alteration("a", 1), Alteration("b", 2)])

        assert received == [[Alteration("a", 1), Alteration("b", 2)]]

    def test_per_key_events_disabled_by_default(self):
        channel = ChangeChannel()
        received = []
        channel.on("change:a", received.append)
        channel.publish([Alteration("a", 1)])
        assert received == []

    def test_per_key_events_follow_batch_in_order(self):
        channel = ChangeChannel(exposed_events=True)
        order = []
        channel.on(CHANGE_EVENT, lambda batch: order.append(("change", len(batch))))
        channel.on("change:a", lambda value: order.append(("a", value)))
        channel.on("change:b", lambda value: order.append(("b", value)))

        channel.publish([Alteration("b", 2), Alteration("a", 1)])

        assert order == [("change", 2), ("b", 2), ("a", 1)]

    def test_listeners_run_in_registration_order(self):
        channel = ChangeChannel()
        order = []
        channel.on(CHANGE_EVENT, lambda batch: order.append("first"))
        channel.on(CHANGE_EVENT, lambda batch: order.append("second"))
        channel.publish([])
        assert order == ["first", "second"]

    def test_once_fires_a_single_time(self):
        channel = ChangeChannel()
        received = []
        channel.once(CHANGE_EVENT, received.append)
        channel.publish([Alteration("a", 1)])
        channel.publish([Alteration("a", 2)])
        assert received == [[Alteration("a", 1)]]

    def test_ignore_removes_all_listeners(self):
        channel = ChangeChannel()
        received = []
        channel.on(CHANGE_EVENT, received.append)
        channel.on(CHANGE_EVENT, received.append)
        channel.ignore(CHANGE_EVENT)
        channel.publish([Alteration("a", 1)])
        assert received == []
        assert channel.listeners(CHANGE_EVENT) == []

    def test_on_returns_listener_for_decorator_use(self):
        channel = ChangeChannel()

        def listener(batch):
            pass

        assert channel.on(CHANGE_EVENT, listener) is listener

    def test_listener_exception_stops_remaining_per_key_events(self):
        channel = ChangeChannel(exposed_events=True)
        received = []

        def boom(value):
            raise RuntimeError("listener failed")

        channel.on("change:a", boom)
        channel.on("change:b", received.append)

        with pytest.raises(RuntimeError, match="listener failed"):
            channel.publish([Alteration("a", 1), Alteration("b", 2)])
        assert received == []
