import pytest

from schema_ts.emitter import DoubleResolutionError, Placeholder


def test_callback_registered_before_resolution_fires_once() -> None:
    ph = Placeholder()
    seen = []
    ph.on_value(seen.append)
    assert seen == []

    ph.set_value("node")
    assert seen == ["node"]
    assert ph.resolved
    assert ph.value == "node"


def test_callback_registered_after_resolution_fires_immediately() -> None:
    ph = Placeholder()
    ph.set_value(42)

    seen = []
    ph.on_value(seen.append)
    assert seen == [42]


def test_callbacks_fire_in_registration_order() -> None:
    ph = Placeholder()
    order = []
    for i in range(3):
        ph.on_value(lambda value, i=i: order.append((i, value)))

    ph.set_value("x")
    assert order == [(0, "x"), (1, "x"), (2, "x")]


def test_second_resolution_is_rejected() -> None:
    ph = Placeholder()
    ph.set_value(1)
    with pytest.raises(DoubleResolutionError):
        ph.set_value(2)
    assert ph.value == 1


def test_pending_placeholder_has_no_value() -> None:
    ph = Placeholder()
    assert not ph.resolved
    assert ph.value is None
    assert "pending" in repr(ph)
