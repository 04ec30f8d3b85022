from flask import Blueprint, current_app, jsonify, request

from ..exceptions import ValidationError
from ..models.customer import Customer, CustomerKind
from ..services.common import page_args
from ..services.registry import current_services
from ..utils.decorators import json_errors, require_fields

bp = Blueprint("customers", __name__, url_prefix="/customers")


@bp.get("")
@json_errors
def list_customers():
    """Query params: name, email, kind, sort=name, page, size."""
    q = {k: (v or "").strip() for k, v in request.args.items()}
    page, size = page_args(q.get("page"), q.get("size"), current_app.config["PAGE_SIZE"])
    svc = current_services().customers

    if q.get("sort") == "name":
        rows = svc.list_sorted(page, size)
    else:
        rows = svc.filter_customers(
            name=q.get("name"), email=q.get("email"), kind=q.get("kind"),
            page=page, size=size,
        )
    return jsonify(customers=[c.to_dict() for c in rows], page=page, size=size)


@bp.post("")
@json_errors
@require_fields("kind", "name", "email", "document")
def create_customer():
    body = request.get_json(silent=True) or {}
    try:
        kind = CustomerKind.parse(body["kind"])
    except ValueError as e:
        raise ValidationError(f"Error: unknown customer kind: {body['kind']}") from e

    customer = current_services().customers.register(Customer(
        kind=kind,
        name=str(body["name"]),
        email=str(body["email"]),
        phone=str(body.get("phone") or ""),
        document=str(body["document"]),
    ))
    return jsonify(customer.to_dict()), 201


@bp.get("/stats")
@json_errors
def customer_stats():
    return jsonify(current_services().customers.statistics())


@bp.get("/<document>")
@json_errors
def customer_detail(document):
    return jsonify(current_services().customers.find(document).to_dict())


@bp.patch("/<document>")
@json_errors
def update_customer(document):
    body = request.get_json(silent=True) or {}
    customer = current_services().customers.update(
        document, name=body.get("name"), email=body.get("email"), phone=body.get("phone"),
    )
    return jsonify(customer.to_dict())


@bp.get("/<document>/rentals")
@json_errors
def customer_rentals(document):
    rows = current_services().rentals.customer_rentals(document)
    return jsonify(rentals=[r.to_dict() for r in rows])
