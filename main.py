"""Bodytrack v1.0 — CLI entry point."""

import argparse
import datetime as dt
import json
import sys

from loguru import logger

from bodytrack import (
    PRESET_WINDOWS,
    analyze_range,
    composition_trend,
    generate_report,
    load_records,
    parse_range,
)


def parse_args(argv=None) -> argparse.Namespace:
    presets = ", ".join(f"{d}d" for d in PRESET_WINDOWS)
    parser = argparse.ArgumentParser(description="Body-composition progress report")
    parser.add_argument("--data", default="sample_records.json", help="JSON file of biometric records")
    parser.add_argument("--range", default="all", help=f"'all', an ISO start date, or a rolling window ({presets})")
    parser.add_argument("--today", type=dt.date.fromisoformat, default=None, help="reference date for rolling windows")
    parser.add_argument("--trend", type=int, default=5, help="recent records to list (0 = all)")
    parser.add_argument("--constitution", default=None, help="JSON file of constitution assessments")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    logger.remove()
    logger.add(sys.stderr, level="WARNING")

    today = args.today or dt.date.today()
    range_filter = parse_range(args.range)
    records = load_records(args.data)

    assessments = None
    if args.constitution:
        with open(args.constitution) as f:
            assessments = json.load(f)

    result = analyze_range(records, range_filter, today)
    trend = composition_trend(records, range_filter.resolve(today), args.trend)
    print(generate_report(result, trend=trend, assessments=assessments))
