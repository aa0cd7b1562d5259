"""Simple demo runner for the simulation core."""
from descore import Scheduler, log_results_only


def main():
    scheduler = Scheduler()

    def greet(s):
        # Actions can schedule follow-up events while they run
        s.timeout(1.0, lambda _s: "reply", {"message": "reply"})
        return "hello"

    scheduler.timeout(0, lambda _s: "Start", {"message": "Start"})
    scheduler.timeout(1.5, greet, {"message": "hello"})
    scheduler.timeout(0.5, context={"message": "quick"})
    cancelled = scheduler.timeout(2.0, lambda _s: "never", {"message": "cancelled"})
    cancelled.deactivate()

    print("Running simulation...")
    for event, result in scheduler.run(lambda s: False, log_filter=log_results_only):
        print(f"Event at t={event.time}: {event.context.get('message')} -> {result}")
    print(f"Simulation ended at t={scheduler.now}")


if __name__ == "__main__":
    main()
