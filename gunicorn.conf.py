"""
Gunicorn configuration for production: gunicorn -c gunicorn.conf.py main:app
"""
from pathlib import Path

from framework.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_DIR.mkdir(parents=True, exist_ok=True)

# Server
bind = f"{settings.HOST}:{settings.PORT}"
backlog = 2048

# Worker processes
workers = 2
worker_class = "uvicorn.workers.UvicornWorker"  # Runs the ASGI lifespan per worker
worker_connections = 1000
max_requests = 1000
max_requests_jitter = 50
timeout = 120
keepalive = 5

proc_name = (settings.GUNICORN_PROC_NAME or settings.APP_NAME.lower().replace(" ", "-"))[:32]

# Logging
accesslog = str(LOG_DIR / "gunicorn_access.log")
errorlog = str(LOG_DIR / "gunicorn_error.log")
loglevel = settings.LOG_LEVEL.lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process management
daemon = False  # Managed by systemd
pidfile = str(LOG_DIR / "gunicorn.pid")
umask = 0o007

# Each worker builds its own engine in the lifespan, so the app is not preloaded
preload_app = False
graceful_timeout = 30

# Request limits
limit_request_line = 4094
limit_request_fields = 100
limit_request_field_size = 8190


def when_ready(server):
    server.log.info("%s is ready. Listening on %s", settings.APP_NAME, server.address)


def on_exit(server):
    server.log.info("%s is shutting down.", settings.APP_NAME)


def post_fork(server, worker):
    server.log.info("Worker spawned (pid: %s)", worker.pid)


def worker_abort(worker):
    worker.log.info("Worker received SIGABRT signal")
