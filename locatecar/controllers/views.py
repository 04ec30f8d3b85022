from flask import Blueprint, jsonify

from ..services.registry import current_services

bp = Blueprint("views", __name__)


@bp.get("/")
def home():
    """Service banner with current fleet counts."""
    store = current_services().store
    return jsonify(
        service="locatecar",
        vehicles=store.vehicles.count(),
        customers=store.customers.count(),
        rentals=store.rentals.count(),
    )


@bp.get("/health")
def health():
    return jsonify(status="ok")
