import logging
import json
import uuid
from flask import request, has_request_context, g
from datetime import datetime, timezone
import sys


class JSONFormatter(logging.Formatter):
    """
    Formatter to output logs in JSON format.
    Includes request_id and render surface if available in Flask context.
    """
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "lineno": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        # Add Request ID if in request context
        if has_request_context():
            log_record["method"] = request.method
            log_record["path"] = request.path
            log_record["remote_ip"] = request.remote_addr
            if hasattr(g, "request_id"):
                log_record["request_id"] = g.request_id
            if hasattr(g, "render_surface"):
                log_record["surface"] = g.render_surface

        return json.dumps(log_record)


def setup_logger(app, level="INFO"):
    """
    Configures the application logger to use JSON formatting
    and output to stdout (for container logging).

    Service modules log through logging.getLogger(__name__); their records
    propagate to the root logger, which gets the same handler.
    """
    # Remove default handlers
    app.logger.handlers.clear()

    # Create stdout handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())

    app.logger.addHandler(handler)
    app.logger.setLevel(level)
    app.logger.propagate = False

    root = logging.getLogger()
    if not any(isinstance(h.formatter, JSONFormatter) for h in root.handlers):
        root.addHandler(handler)
    root.setLevel(level)

    # Also attach to werkzeug logger to capture request logs
    logging.getLogger('werkzeug').handlers = [handler]

    # Setup Gunicorn logger binding if running under Gunicorn
    gunicorn_logger = logging.getLogger('gunicorn.error')
    if gunicorn_logger.handlers:
        app.logger.handlers = gunicorn_logger.handlers
        app.logger.setLevel(gunicorn_logger.level)

    # Add Request ID Middleware
    @app.before_request
    def add_request_id():
        g.request_id = request.headers.get("X-Request-Id", str(uuid.uuid4()))

    @app.after_request
    def echo_request_id(response):
        if hasattr(g, "request_id"):
            response.headers["X-Request-Id"] = g.request_id
        return response

    app.logger.info("Logger setup complete. JSON formatted logs enabled.")
