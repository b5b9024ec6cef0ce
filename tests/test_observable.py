import pytest

from tokenregistry.registry.observable import Observable


def test_subscribe_receives_current_value_then_updates():
    obs = Observable(1)
    seen = []

    obs.subscribe(seen.append)
    obs.set(2)
    obs.update(lambda v: v * 10)

    assert seen == [1, 2, 20]
    assert obs.get() == 20


def test_unsubscribe_stops_notifications():
    obs = Observable("a")
    seen = []

    unsubscribe = obs.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    obs.set("b")

    assert seen == ["a"]
    assert obs.subscriber_count == 0


def test_subscribers_notified_in_order():
    obs = Observable(0)
    calls = []
    obs.subscribe(lambda v: calls.append(("first", v)))
    obs.subscribe(lambda v: calls.append(("second", v)))
    calls.clear()

    obs.set(5)

    assert calls == [("first", 5), ("second", 5)]


def test_unsubscribe_during_notification():
    obs = Observable(0)
    seen = []
    holder = {}

    def once(value):
        seen.append(value)
        if value == 1:
            holder["unsub"]()

    holder["unsub"] = obs.subscribe(once)
    obs.set(1)
    obs.set(2)

    assert seen == [0, 1]


def test_readonly_view_has_no_setter():
    obs = Observable(3)
    view = obs.readonly()
    seen = []

    view.subscribe(seen.append)
    obs.set(4)

    assert view.get() == 4
    assert seen == [3, 4]
    assert not hasattr(view, "set")


def test_registry_connected_flag_is_observable(registry):
    states = []
    registry.connected.subscribe(states.append)

    registry.connect(1)
    registry.disconnect()

    assert states == [False, True, False]


def test_registry_entries_subscription(registry):
    sizes = []
    unsubscribe = registry.entries.subscribe(lambda tokens: sizes.append(None if tokens is None else len(tokens)))

    registry.connect(1)
    registry.connect(2)
    unsubscribe()
    registry.disconnect()

    assert sizes == [None, 2, 1]


def test_subscriber_raising_on_first_call_is_not_registered():
    obs = Observable(0)
    calls = []

    def broken(value):
        calls.append(value)
        raise RuntimeError("subscriber failed")

    with pytest.raises(RuntimeError):
        obs.subscribe(broken)
    obs.set(1)

    assert obs.subscriber_count == 0
    assert calls == [0]
