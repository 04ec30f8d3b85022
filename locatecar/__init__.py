from flask import Flask

from .config import Config
from .controllers.customers import bp as customers_bp
from .controllers.rentals import bp as rentals_bp
from .controllers.reports import bp as reports_bp
from .controllers.vehicles import bp as vehicles_bp
from .controllers.views import bp as views_bp
from .logging_config import configure_logging
from .models.store import Store
from .services.registry import EXTENSION_KEY, build_services
from .utils.filters import utcnow
from .utils.report_sink import NullReportSink, ReportSink


def create_app(config=None, store=None, clock=utcnow):
    """
    Build the JSON API. `config` overrides `Config`; tests pass an explicit
    `store` (and a fixed `clock`) instead of the on-disk one.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)
    app.json.sort_keys = False

    configure_logging(app.config["LOG_LEVEL"])

    if store is None:
        store = Store(app.config["DATA_DIR"] or None)
    reports_dir = app.config["REPORTS_DIR"]
    sink = (ReportSink(reports_dir, clock=clock, timezone=app.config["TIMEZONE"])
            if reports_dir else NullReportSink())
    app.extensions[EXTENSION_KEY] = build_services(store, sink, app.config["TIMEZONE"], clock)

    app.register_blueprint(views_bp)
    app.register_blueprint(vehicles_bp)
    app.register_blueprint(customers_bp)
    app.register_blueprint(rentals_bp)
    app.register_blueprint(reports_bp)

    return app
