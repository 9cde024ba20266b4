from core.debounce import Debouncer


def test_only_last_trigger_fires_after_quiet_period(scheduler) -> None:
    fired = []
    d = Debouncer(scheduler, 700)

    for i in range(5):
        d.trigger(lambda i=i: fired.append(i))
        scheduler.advance(100)

    assert fired == []
    assert scheduler.pending == 1

    scheduler.advance(600)
    assert fired == [4]
    assert not d.pending


def test_separate_quiet_periods_fire_separately(scheduler) -> None:
    fired = []
    d = Debouncer(scheduler, 300)

    d.trigger(lambda: fired.append("a"))
    scheduler.advance(300)
    d.trigger(lambda: fired.append("b"))
    scheduler.advance(300)

    assert fired == ["a", "b"]


def test_cancel_drops_pending_action(scheduler) -> None:
    fired = []
    d = Debouncer(scheduler, 300)

    d.trigger(lambda: fired.append("a"))
    d.cancel()
    scheduler.advance(1000)

    assert fired == []
