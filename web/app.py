"""Flask web application for the oil change calculator."""

import logging
import os
from datetime import date
from pathlib import Path

import yaml
from flask import Flask, flash, jsonify, render_template, request

from estimator import (
    DEFAULT_TABLE,
    DrivingSeverity,
    EstimationRequest,
    InvalidTableError,
    OilClass,
    Outcome,
    VehicleClass,
    estimate,
    format_result,
    load_table,
    parse_date,
    table_to_dict,
)

app = Flask(__name__)
app.secret_key = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-prod")


def get_log_level(name: str) -> int:
    """Numeric level for a LOG_LEVEL name, INFO when unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(level=get_log_level(os.environ.get("LOG_LEVEL", "INFO")))
logger = logging.getLogger(__name__)


def get_table():
    """Interval table from OILCALC_TABLE, or the built-in one."""
    table_path = os.environ.get("OILCALC_TABLE")
    if not table_path:
        return DEFAULT_TABLE
    logger.debug("Loading interval table from %s", table_path)
    try:
        return load_table(Path(table_path))
    except (OSError, yaml.YAMLError) as e:
        raise InvalidTableError(f"Cannot read interval table {table_path}: {e}") from e


@app.errorhandler(InvalidTableError)
def invalid_table(error: InvalidTableError):
    """A misconfigured OILCALC_TABLE is a server error, reported as JSON."""
    logger.error("Invalid interval table: %s", error)
    return jsonify({"error": f"Invalid interval table: {error}"}), 500


def choice_label(value) -> str:
    """Format enum value as a select option label."""
    return value.value.replace("_", " ").title()


def result_color(outcome: Outcome) -> str:
    """Get Tailwind color classes for a result."""
    colors = {
        Outcome.DUE_BY_TIME: "bg-red-100 text-red-800 border-red-200",
        Outcome.OVERDUE: "bg-red-100 text-red-800 border-red-200",
        Outcome.REMAINING_DISTANCE: "bg-green-100 text-green-800 border-green-200",
        Outcome.INVALID_INPUT: "bg-yellow-100 text-yellow-800 border-yellow-200",
        Outcome.INVALID_CONFIGURATION: "bg-gray-100 text-gray-800 border-gray-200",
    }
    return colors.get(outcome, "bg-gray-100 text-gray-800")


# Register template filters
app.jinja_env.filters["choice_label"] = choice_label
app.jinja_env.filters["result_color"] = result_color


def parse_distance(value):
    """Parse a distance field; None when missing or not a number."""
    if value is None or value.strip() == "":
        return None
    try:
        return float(value)
    except ValueError:
        return None


@app.route("/", methods=["GET", "POST"])
def calculator():
    """Oil change calculator form."""
    form = {
        "vehicle": VehicleClass.CAR.value,
        "oil": OilClass.SYNTHETIC.value,
        "distance": "",
        "last_change": "",
        "severity": DrivingSeverity.NORMAL.value,
    }
    result = None
    message = None

    if request.method == "POST":
        form.update({k: request.form.get(k, v) for k, v in form.items()})

        distance = parse_distance(form["distance"])
        if distance is None:
            flash("Please enter a valid distance.", "error")
            return render_calculator(form), 400

        try:
            last_change = parse_date(form["last_change"])
        except ValueError:
            flash("Please enter a valid date.", "error")
            return render_calculator(form), 400

        try:
            est_request = EstimationRequest(
                vehicle_class=VehicleClass(form["vehicle"]),
                oil_class=OilClass(form["oil"]),
                distance_driven_km=distance,
                last_change_date=last_change,
                driving_severity=DrivingSeverity(form["severity"]),
            )
        except ValueError:
            flash("Invalid vehicle type or oil type.", "error")
            return render_calculator(form), 400

        result = estimate(est_request, date.today(), get_table())
        message = format_result(result)

    return render_calculator(form, result, message)


def render_calculator(form, result=None, message=None):
    return render_template(
        "calculator.html",
        form=form,
        result=result,
        message=message,
        vehicles=list(VehicleClass),
        oils=list(OilClass),
        severities=list(DrivingSeverity),
    )


@app.route("/api/estimate")
def api_estimate():
    """JSON estimate from query parameters."""
    args = request.args
    try:
        est_request = EstimationRequest(
            vehicle_class=VehicleClass(args.get("vehicle", "")),
            oil_class=OilClass(args.get("oil", "")),
            distance_driven_km=float(args.get("distance", "")),
            last_change_date=parse_date(args.get("last_change")),
            driving_severity=DrivingSeverity(args.get("severity") or "normal"),
        )
        now = parse_date(args.get("now")) or date.today()
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    result = estimate(est_request, now, get_table())
    return jsonify(
        {
            "outcome": result.outcome.name,
            "km": result.km,
            "message": format_result(result),
        }
    )


@app.route("/api/intervals")
def api_intervals():
    """The active interval table as JSON."""
    return jsonify(table_to_dict(get_table()))


if __name__ == "__main__":
    # Run with debug mode for development
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    app.run(debug=True, host="0.0.0.0", port=5001)
