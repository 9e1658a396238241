import os

# Preload so import-time config errors fail the boot, not the first request
preload_app = True

# Layout resolution is CPU-only and stateless; scale with workers
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

# Bind
bind = f"0.0.0.0:{os.environ.get('PORT', '8080')}"

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()

# Timeout
timeout = 30
