"""ResultNotifier 단위 테스트."""

from __future__ import annotations

from station_finder.services.impl.result_notifier import ResultNotifier, get_default_notifier
from tests.helpers import RecordingObserver


class ExplodingObserver:
    def deliver(self, results):
        raise RuntimeError("table view gone")


def test_notify_in_insertion_order(stations):
    notifier = ResultNotifier()
    order: list[str] = []

    class Named:
        def __init__(self, name):
            self.name = name

        def deliver(self, results):
            order.append(self.name)

    for name in ("map", "list", "badge"):
        notifier.add_observer(Named(name))

    notifier.notify(stations)

    assert order == ["map", "list", "badge"]


def test_each_observer_notified_once(stations):
    notifier = ResultNotifier()
    first, second = RecordingObserver("first"), RecordingObserver("second")
    notifier.add_observer(first)
    notifier.add_observer(second)
    notifier.add_observer(first)

    delivered = notifier.notify(stations)

    assert delivered == 2
    assert first.received == [stations]
    assert second.received == [stations]


def test_remove_observer(stations):
    notifier = ResultNotifier()
    observer = RecordingObserver()
    notifier.add_observer(observer)
    notifier.remove_observer(observer)

    notifier.notify(stations)

    assert observer.received == []
    assert notifier.observers == []


def test_remove_unregistered_observer_is_noop():
    notifier = ResultNotifier()
    notifier.remove_observer(RecordingObserver())
    assert notifier.observers == []


def test_failing_observer_does_not_block_others(stations):
    notifier = ResultNotifier()
    survivor = RecordingObserver()
    notifier.add_observer(ExplodingObserver())
    notifier.add_observer(survivor)

    delivered = notifier.notify(stations)

    assert delivered == 1
    assert survivor.received == [stations]


def test_observer_gets_its_own_list(stations):
    """옵저버가 받은 목록을 수정해도 다른 옵저버에 영향 없음."""
    notifier = ResultNotifier()

    class Mutating:
        def deliver(self, results):
            results.clear()

    survivor = RecordingObserver()
    notifier.add_observer(Mutating())
    notifier.add_observer(survivor)

    notifier.notify(stations)

    assert survivor.received == [stations]


def test_default_notifier_is_shared():
    assert get_default_notifier() is get_default_notifier()
