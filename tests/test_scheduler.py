from zombie_yard.gameplay.scheduler import FrameScheduler, PygameFrameHost


def test_arming_twice_keeps_a_single_request() -> None:
    host = PygameFrameHost()
    scheduler = FrameScheduler(host)
    calls: list[float] = []

    scheduler.arm(calls.append)
    scheduler.arm(calls.append)

    assert host.pending_count == 1
    assert host.run_pending(16.0) == 1
    assert calls == [16.0]
    assert scheduler.armed is False


def test_cancelled_request_never_fires() -> None:
    host = PygameFrameHost()
    scheduler = FrameScheduler(host)
    calls: list[float] = []

    scheduler.arm(calls.append)
    scheduler.cancel()

    assert host.pending_count == 0
    assert host.run_pending(16.0) == 0
    assert calls == []


def test_rearm_inside_callback_waits_for_next_frame() -> None:
    host = PygameFrameHost()
    scheduler = FrameScheduler(host)
    calls: list[float] = []

    def on_frame(timestamp: float) -> None:
        calls.append(timestamp)
        scheduler.arm(on_frame)

    scheduler.arm(on_frame)

    assert host.run_pending(16.0) == 1
    assert host.run_pending(32.0) == 1
    assert calls == [16.0, 32.0]
    assert scheduler.armed is True
    assert host.pending_count == 1


def test_callback_cancelled_by_earlier_callback_in_same_frame() -> None:
    host = PygameFrameHost()
    calls: list[str] = []
    tokens: list[int] = []

    def first(_ts: float) -> None:
        calls.append("first")
        host.cancel_frame(tokens[0])

    host.request_frame(first)
    tokens.append(host.request_frame(lambda _ts: calls.append("second")))

    assert host.run_pending(16.0) == 1
    assert calls == ["first"]
