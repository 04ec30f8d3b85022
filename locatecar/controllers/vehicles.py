from flask import Blueprint, current_app, jsonify, request

from ..exceptions import ValidationError
from ..models.repository import paginate
from ..models.vehicle import Vehicle, VehicleCategory
from ..services.common import page_args, to_bool_safe
from ..services.registry import current_services
from ..utils.decorators import json_errors, require_fields

bp = Blueprint("vehicles", __name__, url_prefix="/vehicles")


def _parse_category(value) -> VehicleCategory:
    try:
        return VehicleCategory.parse(value)
    except ValueError as e:
        raise ValidationError(f"Error: unknown category: {value}") from e


@bp.get("")
@json_errors
def list_vehicles():
    """
    Fleet listing. Query params: category, manufacturer, available, model,
    sort=model, page, size. Empty params are ignored.
    """
    q = {k: (v or "").strip() for k, v in request.args.items()}
    page, size = page_args(q.get("page"), q.get("size"), current_app.config["PAGE_SIZE"])
    svc = current_services().vehicles

    if q.get("model"):
        rows = paginate(svc.search_by_model(q["model"]), page, size)
    elif q.get("sort") == "model":
        rows = svc.list_sorted(page, size)
    else:
        rows = svc.filter_vehicles(
            category=q.get("category"),
            manufacturer=q.get("manufacturer"),
            available=to_bool_safe(q.get("available")),
            page=page,
            size=size,
        )
    return jsonify(vehicles=[v.to_dict() for v in rows], page=page, size=size)


@bp.post("")
@json_errors
@require_fields("plate", "model", "manufacturer", "category")
def create_vehicle():
    body = request.get_json(silent=True) or {}
    vehicle = current_services().vehicles.register(Vehicle(
        plate=str(body["plate"]).strip(),
        model=str(body["model"]),
        manufacturer=str(body["manufacturer"]),
        category=_parse_category(body["category"]),
    ))
    return jsonify(vehicle.to_dict()), 201


@bp.get("/stats")
@json_errors
def vehicle_stats():
    return jsonify(current_services().vehicles.statistics())


@bp.get("/<plate>")
@json_errors
def vehicle_detail(plate):
    return jsonify(current_services().vehicles.find(plate).to_dict())


@bp.patch("/<plate>")
@json_errors
def update_vehicle(plate):
    """Only model and manufacturer can change."""
    body = request.get_json(silent=True) or {}
    vehicle = current_services().vehicles.update(
        plate, model=body.get("model"), manufacturer=body.get("manufacturer"),
    )
    return jsonify(vehicle.to_dict())


@bp.get("/<plate>/rentals")
@json_errors
def vehicle_rentals(plate):
    """Every rental of this vehicle, open or returned."""
    rows = current_services().rentals.vehicle_rentals(plate)
    return jsonify(rentals=[r.to_dict() for r in rows])
