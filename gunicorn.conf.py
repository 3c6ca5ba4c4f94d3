"""Gunicorn config for container deployment."""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Requests are stateless, so workers share nothing. Tune via WEB_CONCURRENCY.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

timeout = 60
graceful_timeout = 30

keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("DINING_WRAP_LOG_LEVEL", "info").lower()
