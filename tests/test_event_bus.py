from spring_animation.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)
        received["sender"] = sender

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"
    assert received["sender"] is bus


def test_event_bus_emit_without_subscribers_is_noop():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)
    received = []
    bus.subscribe("other", lambda sender, **kw: received.append(kw))
    bus.emit("nobody_listens", value=2)
    assert received == []


def test_event_bus_keeps_lambda_handlers_alive():
    bus = EventBus()
    calls = []
    bus.subscribe("ping", lambda sender, **kw: calls.append(kw["n"]))
    bus.emit("ping", n=1)
    bus.emit("ping", n=2)
    assert calls == [1, 2]
