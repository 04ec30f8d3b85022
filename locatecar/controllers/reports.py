from flask import Blueprint, jsonify, request

from ..exceptions import ValidationError
from ..services.registry import current_services
from ..utils.decorators import json_errors
from ..utils.filters import fmt_iso, parse_iso

bp = Blueprint("reports", __name__, url_prefix="/reports")


def _period():
    """start/end query params as aware datetimes; both are required."""
    try:
        start = parse_iso(request.args.get("start"))
        end = parse_iso(request.args.get("end"))
    except ValueError as e:
        raise ValidationError("Error: invalid date (use ISO-8601)") from e
    if start is None or end is None:
        raise ValidationError("Error: start and end are required")
    return start, end


@bp.get("/revenue")
@json_errors
def revenue():
    start, end = _period()
    total = current_services().analytics.revenue_by_period(start, end)
    return jsonify(start=fmt_iso(start), end=fmt_iso(end), revenue=round(total, 2))


@bp.get("/top-vehicles")
@json_errors
def top_vehicles():
    rows = current_services().analytics.top_vehicles()
    return jsonify(vehicles=[{"vehicle": k, "count": n} for k, n in rows])


@bp.get("/top-customers")
@json_errors
def top_customers():
    rows = current_services().analytics.top_customers()
    return jsonify(customers=[{"customer": k, "count": n} for k, n in rows])


@bp.get("/summary")
@json_errors
def summary():
    return jsonify(current_services().analytics.summary())


@bp.post("/<name>")
@json_errors
def emit_report(name):
    """Generate a text report and save it: revenue, top-vehicles, top-customers."""
    analytics = current_services().analytics
    if name == "revenue":
        body = analytics.revenue_report(*_period())
    elif name == "top-vehicles":
        body = analytics.top_vehicles_report()
    elif name == "top-customers":
        body = analytics.top_customers_report()
    else:
        raise ValidationError(f"Error: unknown report: {name}")
    return jsonify(report=name, body=body), 201
