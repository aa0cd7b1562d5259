import copy

from descore.event import Event, noop_action
from descore.scheduler import Scheduler


def test_defaults():
    e = Event(5.0)
    assert e.time == 5.0
    assert e.active is True
    assert e.context == {}
    assert e.action is noop_action


def test_run_returns_action_result():
    e = Event(0.0, lambda s: "Executed")
    assert e.run(Scheduler()) == "Executed"


def test_default_action_returns_none():
    assert Event(1.0).run(Scheduler()) is None


def test_inactive_event_does_not_call_action():
    calls = []

    def action(s):
        calls.append(s)
        return "Executed"

    e = Event(0.0, action)
    e.deactivate()
    assert e.run(Scheduler()) is None
    assert calls == []


def test_activate_after_deactivate():
    e = Event(0.0, lambda s: "back")
    e.deactivate()
    e.activate()
    assert e.active is True
    assert e.run(Scheduler()) == "back"


def test_action_receives_scheduler_and_can_schedule():
    s = Scheduler()

    def action(sched):
        sched.timeout(3.0)

    e = Event(0.0, action)
    assert e.run(s) is None
    assert len(s.event_queue) == 1
    assert s.event_queue.peek().time == 3.0


def test_duplicate_drops_action_and_keeps_fields():
    e = Event(5.0, lambda s: "Executed", {"key": "value"})
    e.deactivate()
    dup = e.duplicate()
    assert dup is not e
    assert dup.time == 5.0
    assert dup.active is False
    assert dup.context == {"key": "value"}
    dup.activate()
    assert dup.run(Scheduler()) is None


def test_duplicate_context_is_independent():
    e = Event(1.0, context={"key": "value"})
    dup = e.duplicate()
    dup.context["key"] = "changed"
    assert e.context["key"] == "value"


def test_copy_module_uses_duplicate():
    e = Event(2.0, lambda s: "Executed", {"a": "b"})
    for dup in (copy.copy(e), copy.deepcopy(e)):
        assert dup.context == {"a": "b"}
        assert dup.run(Scheduler()) is None


def test_ordering_uses_time_only():
    early = Event(1.0, lambda s: "x", {"id": "early"})
    late = Event(2.0)
    assert early < late
    assert late > early
    assert early <= Event(1.0)
    assert late >= Event(2.0)
    assert Event(1.0, context={"id": "a"}) == Event(1.0, context={"id": "b"})
    assert Event(1.0) != Event(1.5)


def test_sorted_events():
    events = [Event(t) for t in (3.0, -1.0, 2.5, 0.0)]
    assert [e.time for e in sorted(events)] == [-1.0, 0.0, 2.5, 3.0]
