import logging

from flask import Flask, jsonify
from flask_cors import CORS
from sqlalchemy import event

from hrms.config import Config
from hrms.models import db

__version__ = "1.0.0"

LOG_FORMAT = "[%(asctime)s] %(levelname)s in %(name)s: %(message)s"


def _configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("hrms").setLevel(level)
    app.logger.setLevel(level)


def _enable_sqlite_foreign_keys(app):
    if not app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite"):
        return

    @event.listens_for(db.engine, "connect")
    def _configure_sqlite(dbapi_connection, _connection_record):
        # SQLite ignores ON DELETE rules unless asked per connection
        dbapi_connection.execute("PRAGMA foreign_keys=ON")


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    _configure_logging(app)

    # Initialize Extensions
    origins = [o.strip() for o in str(app.config.get("CORS_ORIGINS", "*")).split(",") if o.strip()]
    CORS(app, resources={r"/*": {
        "origins": origins or "*",
        "allow_headers": ["Content-Type", "Authorization"],
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    }})
    db.init_app(app)

    from hrms.utils.errors import register_error_handlers
    register_error_handlers(app)

    # Import Blueprints
    from hrms.auth import auth_bp
    from hrms.tenant import tenant_bp
    from hrms.employee import employee_bp
    from hrms.goal import goal_bp
    from hrms.review import review_bp
    from hrms.leave import leave_bp
    from hrms.timesheet import timesheet_bp
    from hrms.announcement import announcement_bp
    from hrms.recognition import recognition_bp
    from hrms.onboarding import onboarding_bp
    from hrms.document import document_bp

    # Register Blueprints
    for bp in (
        auth_bp, tenant_bp, employee_bp, goal_bp, review_bp, leave_bp,
        timesheet_bp, announcement_bp, recognition_bp, onboarding_bp, document_bp,
    ):
        app.register_blueprint(bp)

    with app.app_context():
        _enable_sqlite_foreign_keys(app)

    from hrms.cli import register_commands
    register_commands(app)

    @app.route("/")
    def home():
        return jsonify({
            "message": "HRMS Multi-Tenant API",
            "version": __version__,
            "endpoints": sorted(
                {rule.rule for rule in app.url_map.iter_rules() if rule.endpoint != "static"}
            ),
        })

    app.logger.info("HRMS app created (database: %s)", app.config["SQLALCHEMY_DATABASE_URI"].split("://")[0])
    return app
