"""Run a YAML scenario and print the resulting event log."""
import argparse
import logging
import sys
from typing import List, Optional

import yaml

from .conditions import log_all, log_results_only
from .scenario import Scenario
from .scheduler import LogEntry, Scheduler


def format_entry(entry: LogEntry) -> str:
    event, result = entry
    context = ", ".join(f"{k}={v}" for k, v in sorted(event.context.items()))
    return f"t={event.time:g} | {result if result is not None else '-'} | {context}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="descore", description="Run a discrete-event scenario from YAML.")
    parser.add_argument("scenario", help="path to the scenario YAML file")
    parser.add_argument("--max-time", type=float, default=None, help="override the scenario's max_time")
    parser.add_argument("--results-only", action="store_true", help="only log events that produced a result")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        scenario = Scenario.from_yaml(args.scenario)
    except (FileNotFoundError, ValueError, TypeError, yaml.YAMLError) as exc:
        parser.error(str(exc))

    if args.max_time is not None:
        scenario.max_time = args.max_time

    scheduler = Scheduler()
    try:
        log = scenario.run(scheduler, log_filter=log_results_only if args.results_only else log_all)
    except ValueError as exc:
        parser.error(str(exc))

    print(f"Scenario: {scenario.name}")
    print("=" * 60)
    for entry in log:
        print(format_entry(entry))
    print("=" * 60)
    print(f"{len(log)} event(s) logged; ended at t={scheduler.current_time:g}; {len(scheduler.event_queue)} pending")
    return 0


if __name__ == "__main__":
    sys.exit(main())
