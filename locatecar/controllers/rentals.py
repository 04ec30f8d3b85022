from flask import Blueprint, current_app, jsonify, request

from ..services.common import page_args
from ..services.registry import current_services
from ..utils.decorators import json_errors, require_fields

bp = Blueprint("rentals", __name__, url_prefix="/rentals")


@bp.post("")
@json_errors
@require_fields("plate", "document")
def checkout():
    """Rent a vehicle: body {plate, document, location}."""
    body = request.get_json(silent=True) or {}
    rental = current_services().rentals.checkout(
        plate=str(body["plate"]),
        document=str(body["document"]),
        location=str(body.get("location") or ""),
    )
    return jsonify(rental.to_dict()), 201


@bp.post("/<plate>/return")
@json_errors
def return_vehicle(plate):
    """Close the open rental of a vehicle and return the bill."""
    rental = current_services().rentals.return_vehicle(plate)
    return jsonify(rental.to_dict())


@bp.get("/active")
@json_errors
def active_rentals():
    page, size = page_args(request.args.get("page"), request.args.get("size"),
                           current_app.config["PAGE_SIZE"])
    rows = current_services().rentals.active_rentals(page, size)
    return jsonify(rentals=[r.to_dict() for r in rows], page=page, size=size)


@bp.get("/history")
@json_errors
def rental_history():
    """All rentals, newest first."""
    page, size = page_args(request.args.get("page"), request.args.get("size"),
                           current_app.config["PAGE_SIZE"])
    rows = current_services().rentals.history(page, size)
    return jsonify(rentals=[r.to_dict() for r in rows], page=page, size=size)
