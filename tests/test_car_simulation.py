import logging

from descore.scheduler import Scheduler
from simulations.Car.simulation import Car, MAX_TIME, car


def test_function_style_car_trace():
    s = Scheduler()
    car(s)
    log = s.run_until_max_time(MAX_TIME)
    assert [(e.time, r) for e, r in log] == [
        (0.0, "park"),
        (5.0, "drive"),
        (7.0, "park"),
        (12.0, "drive"),
        (14.0, "park"),
    ]
    assert [e.context["state"] for e, _ in log] == ["park", "drive", "park", "drive", "park"]
    # the drive scheduled by the last park remains queued
    assert [e.time for e in s.peek_events()] == [19.0]


def test_function_style_car_logs_state_changes(caplog):
    s = Scheduler()
    car(s)
    with caplog.at_level(logging.INFO, logger="simulations.Car.simulation"):
        s.run_until_max_time(6.0)
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["Start parking at 0.0", "Start driving at 5.0"]


def test_object_style_car_history():
    s = Scheduler()
    c = Car(s)
    s.run_until_max_time(15)
    assert c.history == [
        (0.0, "charge"),
        (5.0, "drive"),
        (7.0, "charge"),
        (12.0, "drive"),
        (14.0, "charge"),
    ]


def test_object_style_custom_durations():
    s = Scheduler()
    c = Car(s, charge_duration=1.0, trip_duration=3.0, name="ev")
    log = s.run_until_max_time(8)
    assert [t for t, _ in c.history] == [0.0, 1.0, 4.0, 5.0]
    assert all(e.context == {"car": "ev"} for e, _ in log)


def test_two_cars_share_a_scheduler():
    s = Scheduler()
    fast = Car(s, charge_duration=1.0, trip_duration=1.0, name="fast")
    slow = Car(s, name="slow")
    s.run_until_max_time(6)
    assert len(fast.history) == 6
    assert [state for _, state in slow.history] == ["charge", "drive"]
