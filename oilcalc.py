#!/usr/bin/env python3
"""
CLI for estimating oil change intervals.

Commands:
  estimate - Show how far a vehicle is from its next oil change
  table    - List the oil change interval table
  batch    - Estimate every request in a YAML batch file
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
import yaml
from typing import List, Optional, Tuple

from estimator import (
    DEFAULT_TABLE,
    DrivingSeverity,
    EstimationRequest,
    EstimationResult,
    IntervalTable,
    OilClass,
    Outcome,
    VehicleClass,
    calc_due_date,
    estimate,
    format_km,
    format_overrun_km,
    format_months,
    format_result,
    load_requests,
    load_table,
    outcome_label,
    parse_date,
    scaled_limit_km,
)

logger = logging.getLogger("oilcalc")

# =============================================================================
# Formatting helpers
# =============================================================================


def display_name(value) -> str:
    """Human-readable enum value, e.g. 'semi synthetic'."""
    return value.value.replace("_", " ")


def format_date(value: Optional[date]) -> str:
    """Format a date for display."""
    return value.isoformat() if value is not None else "-"


def describe_request(request: EstimationRequest) -> List[Tuple[str, str]]:
    """Label/value pairs summarizing a request."""
    return [
        ("Vehicle", display_name(request.vehicle_class)),
        ("Oil", display_name(request.oil_class)),
        ("Driven", f"{format_km(request.distance_driven_km)} km"),
        ("Last change", format_date(request.last_change_date)),
        ("Conditions", display_name(request.driving_severity)),
    ]


# =============================================================================
# Estimate command
# =============================================================================


def cmd_estimate(args, table: IntervalTable, now: date):
    """Show how far a vehicle is from its next oil change."""
    request = EstimationRequest(
        vehicle_class=VehicleClass(args.vehicle),
        oil_class=OilClass(args.oil),
        distance_driven_km=args.distance,
        last_change_date=args.last_change,
        driving_severity=(
            DrivingSeverity.SEVERE if args.severe else DrivingSeverity.NORMAL
        ),
    )

    for label, value in describe_request(request):
        print(f"{label + ':':<13}{value}")
    print(f"{'As of:':<13}{now.isoformat()}")
    print()

    result = estimate(request, now, table)
    print(format_result(result))

    rec = table.get(request.vehicle_class, request.oil_class)
    if result.is_valid and rec is not None:
        limit = scaled_limit_km(rec.distance_limit_km, request.driving_severity)
        print(
            f"Limit: {format_km(limit)} km / "
            f"{format_months(rec.time_limit_months)}"
        )
        time_due = calc_due_date(request.last_change_date, rec.time_limit_months)
        if time_due is not None:
            print(f"Time limit reached: {time_due.isoformat()}")

    return 0 if result.is_valid else 1


# =============================================================================
# Table command
# =============================================================================


def make_interval_table(table: IntervalTable, severe: bool) -> List[List[str]]:
    """Convert an interval table to rows."""
    severity = DrivingSeverity.SEVERE if severe else DrivingSeverity.NORMAL
    rows = []
    for (vehicle_class, oil_class), rec in table:
        rows.append(
            [
                display_name(vehicle_class),
                display_name(oil_class),
                format_km(scaled_limit_km(rec.distance_limit_km, severity)),
                format_months(rec.time_limit_months),
            ]
        )
    return rows


def cmd_table(args, table: IntervalTable):
    """List the oil change interval table."""
    if args.severe:
        print("Mode: SEVERE DRIVING (distance limits shortened)")
        print()
    headers = ["Vehicle", "Oil", "Limit (km)", "Limit (time)"]
    print(
        tabulate(
            make_interval_table(table, args.severe),
            headers=headers,
            tablefmt="simple",
        )
    )
    return 0


# =============================================================================
# Batch command
# =============================================================================


def make_batch_table(
    requests: List[EstimationRequest], results: List[EstimationResult]
) -> List[List[str]]:
    """Convert requests and their results to rows."""
    rows = []
    for request, result in zip(requests, results):
        remaining = "-"
        if result.outcome == Outcome.REMAINING_DISTANCE:
            remaining = format_km(result.km)
        elif result.outcome == Outcome.OVERDUE:
            remaining = f"-{format_overrun_km(result.km)}"
        rows.append(
            [
                display_name(request.vehicle_class),
                display_name(request.oil_class),
                format_km(request.distance_driven_km),
                format_date(request.last_change_date),
                display_name(request.driving_severity),
                outcome_label(result.outcome),
                remaining,
            ]
        )
    return rows


def cmd_batch(args, table: IntervalTable, now: date):
    """Estimate every request in a YAML batch file."""
    if not args.batch_file.exists():
        print(f"Error: File not found: {args.batch_file}")
        return 1

    try:
        requests = load_requests(args.batch_file)
    except (KeyError, ValueError, yaml.YAMLError) as e:
        print(f"Error: Invalid batch file {args.batch_file}: {e}")
        return 1

    print(f"Requests: {len(requests)} (as of {now.isoformat()})")
    print()
    if not requests:
        print("No requests found.")
        return 0

    results = [estimate(request, now, table) for request in requests]
    due = sum(1 for r in results if r.is_due)

    headers = [
        "Vehicle",
        "Oil",
        "Driven (km)",
        "Last Change",
        "Conditions",
        "Status",
        "Remaining (km)",
    ]
    print(tabulate(make_batch_table(requests, results), headers=headers, tablefmt="simple"))
    print()
    print(f"Due: {due} of {len(results)}")

    return 0


# =============================================================================
# Main
# =============================================================================


def iso_date(value: str) -> date:
    """argparse type for YYYY-MM-DD dates."""
    try:
        return parse_date(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Oil change interval estimator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s estimate car synthetic 10000
  %(prog)s estimate car semi_synthetic 1000 --last-change 2025-01-10
  %(prog)s estimate motorcycle_heavy_duty conventional 3000 --severe
  %(prog)s table --severe
  %(prog)s --table tables/default.yaml batch batches/fleet.yaml
""",
    )
    parser.add_argument(
        "--table",
        type=Path,
        help="Path to interval table YAML file (default: built-in table)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Estimate subcommand
    estimate_parser = subparsers.add_parser(
        "estimate", help="Show how far a vehicle is from its next oil change"
    )
    estimate_parser.add_argument(
        "vehicle",
        choices=[v.value for v in VehicleClass],
        help="Vehicle class",
    )
    estimate_parser.add_argument(
        "oil",
        choices=[o.value for o in OilClass],
        help="Oil class",
    )
    estimate_parser.add_argument(
        "distance",
        type=float,
        help="Kilometers driven since the last oil change",
    )
    estimate_parser.add_argument(
        "--last-change",
        type=iso_date,
        help="Date of the last oil change (YYYY-MM-DD)",
    )
    estimate_parser.add_argument(
        "--severe",
        action="store_true",
        help="Severe driving conditions (distance limit shortened by 20%%)",
    )
    estimate_parser.add_argument(
        "--now",
        type=iso_date,
        help="Evaluate as of this date (default: today)",
    )

    # Table subcommand
    table_parser = subparsers.add_parser(
        "table", help="List the oil change interval table"
    )
    table_parser.add_argument(
        "--severe",
        action="store_true",
        help="Show severe driving distance limits",
    )

    # Batch subcommand
    batch_parser = subparsers.add_parser(
        "batch", help="Estimate every request in a YAML batch file"
    )
    batch_parser.add_argument(
        "batch_file",
        type=Path,
        help="Path to batch YAML file (e.g., batches/fleet.yaml)",
    )
    batch_parser.add_argument(
        "--now",
        type=iso_date,
        help="Evaluate as of this date (default: today)",
    )

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    table = DEFAULT_TABLE
    if args.table is not None:
        if not args.table.exists():
            print(f"Error: File not found: {args.table}")
            return 1
        try:
            table = load_table(args.table)
        except (ValueError, yaml.YAMLError) as e:
            print(f"Error: Invalid interval table {args.table}: {e}")
            return 1
        logger.debug("Loaded interval table from %s", args.table)

    now = getattr(args, "now", None) or date.today()

    # Dispatch to command handler
    if args.command == "estimate":
        return cmd_estimate(args, table, now)
    elif args.command == "table":
        return cmd_table(args, table)
    elif args.command == "batch":
        return cmd_batch(args, table, now)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
