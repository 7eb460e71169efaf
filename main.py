# main.py
import logging

import matplotlib.pyplot as plt

from planner.config import load_prefs
from planner.dates import add_days
from planner.frames import daily_load, schedule_to_frame
from planner.metrics import start_metrics_server
from planner.planner import build_plan, reschedule


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    start_metrics_server(8000)
    prefs = load_prefs()
    start = "2025-11-03"

    weeks = build_plan(
        goal="Frontend Developer",
        skills="react, css, javascript",
        daily_hours=prefs.daily_hours,
        weeks_count=prefs.weeks_count,
        tasks_per_week=prefs.tasks_per_week,
        start_date=start,
    )

    print("=== Plan ===")
    for week in weeks:
        print(f"Week {week.index} (from {week.start_date})")
        for day in week.days:
            for task in day.tasks:
                print(f"  {day.date}  {task.text}")

    # First two days done, the rest slipped: re-plan from day 5
    days = [day for week in weeks for day in week.days]
    done_ids = {task.id for day in days[:2] for task in day.tasks}
    revised = reschedule(days, done_ids, add_days(start, 4), prefs.daily_hours)

    print("=== Rescheduled ===")
    print(schedule_to_frame(revised))

    load = daily_load(revised, prefs.daily_hours)
    plt.figure(figsize=(10, 3))
    plt.bar(load["date"], load["hours"], label="planned")
    plt.bar(load["date"], load["done_hours"], label="done")
    plt.axhline(prefs.daily_hours, color="grey", linestyle="--")
    plt.title("Hours per Day")
    plt.xlabel("Date")
    plt.ylabel("Hours")
    plt.xticks(rotation=60)
    plt.legend()
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
