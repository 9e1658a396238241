from flask import Flask, jsonify

from config import (
    SECRET_KEY,
    MAX_CONTENT_LENGTH,
    LOG_LEVEL,
    RATELIMIT_ENABLED,
    RATELIMIT_DEFAULT,
    RATELIMIT_STORAGE_URI,
)
from constants import LAYOUT_VERSION
from extensions import limiter

# Blueprints
from routes.layout import layout_bp
from routes.public import public_bp
from routes.export import export_bp


def create_app(test_config=None):
    app = Flask(__name__)

    app.config['SECRET_KEY'] = SECRET_KEY
    app.config['MAX_CONTENT_LENGTH'] = MAX_CONTENT_LENGTH
    app.json.sort_keys = False

    # Rate Limiting (read by Flask-Limiter on init_app)
    app.config['RATELIMIT_ENABLED'] = RATELIMIT_ENABLED
    app.config['RATELIMIT_DEFAULT'] = RATELIMIT_DEFAULT
    app.config['RATELIMIT_STORAGE_URI'] = RATELIMIT_STORAGE_URI

    # Apply Test Config Overrides
    if test_config:
        app.config.update(test_config)

    # Setup Structured Logging
    from utils.logger import setup_logger
    setup_logger(app, level=LOG_LEVEL)

    # Extensions
    limiter.init_app(app)

    @app.route("/healthz")
    def healthz():
        """Validates the layout engine answers with its defaults."""
        from services.header_layout import get_header_layout, get_standard_logo_height
        try:
            layout = get_header_layout("header-left", "left")
            height = get_standard_logo_height("medium")
            ok = layout.is_collision_left and height > 0
        except Exception as e:
            app.logger.error(f"[Health] Layout engine self-check failed: {e}")
            return {"status": "error", "engine": str(e)}, 503
        if not ok:
            return {"status": "error", "engine": "self-check mismatch"}, 503
        return {"status": "ok", "engine": "ready", "layoutVersion": LAYOUT_VERSION}, 200

    # Simple ping endpoint for Docker health checks
    @app.route("/ping")
    @limiter.exempt
    def ping():
        return {"status": "ok"}, 200

    # Blueprints
    app.register_blueprint(layout_bp)
    app.register_blueprint(public_bp)
    app.register_blueprint(export_bp)

    # JSON errors for API clients
    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"ok": False, "error": "not_found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"ok": False, "error": "method_not_allowed"}), 405

    @app.errorhandler(413)
    def payload_too_large(e):
        return jsonify({"ok": False, "error": "payload_too_large"}), 413

    @app.errorhandler(429)
    def rate_limited(e):
        return jsonify({"ok": False, "error": "rate_limited"}), 429

    # CLI Commands
    @app.cli.command("check-layout-delegation")
    def check_layout_delegation_cmd():
        """Fail if any module re-implements the header layout engine."""
        from scripts.check_layout_delegation import check_layout_delegation
        check_layout_delegation()

    return app


# WSGI Entry Point
app = create_app()

if __name__ == "__main__":
    app.run(host='0.0.0.0', debug=True)
