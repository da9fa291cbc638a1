"""
Gunicorn configuration file for production deployment.

    gunicorn -c gunicorn.conf.py main:app
"""
import multiprocessing
import os
from pathlib import Path

# Load LOG_DIR from .env (via core.config)
from core.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_DIR.mkdir(parents=True, exist_ok=True)

# Server
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
backlog = 2048

# Worker processes; each worker runs the app lifespan and owns its own connection pool
workers = int(os.getenv("GUNICORN_WORKERS", min(multiprocessing.cpu_count(), 4)))
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 1000
max_requests = 1000
max_requests_jitter = 50
timeout = 120
keepalive = 5

# Process name (from config; fallback to APP_NAME)
proc_name = (settings.GUNICORN_PROC_NAME or settings.APP_NAME.lower().replace(" ", "-"))[:32]

# Logging (paths built from LOG_DIR in .env)
accesslog = str(LOG_DIR / "gunicorn_access.log")
errorlog = str(LOG_DIR / "gunicorn_error.log")
loglevel = settings.LOG_LEVEL.lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process management
daemon = False  # Managed by systemd
pidfile = str(LOG_DIR / "gunicorn.pid")
umask = 0o007

# Connections must not be shared across fork; the lifespan opens them per worker
preload_app = False
worker_tmp_dir = "/dev/shm"

graceful_timeout = 30

# Security
limit_request_line = 4094
limit_request_fields = 100
limit_request_field_size = 8190

def when_ready(server):
    """Callback when server is ready."""
    server.log.info("%s is ready. Listening on %s", settings.APP_NAME, server.address)

def on_exit(server):
    """Callback when server exits."""
    server.log.info("%s is shutting down.", settings.APP_NAME)

def post_fork(server, worker):
    """Callback after forking worker."""
    server.log.info("Worker spawned (pid: %s)", worker.pid)

def worker_abort(worker):
    """Callback when worker aborts (e.g. startup blocked on an unreachable database)."""
    worker.log.info("Worker received SIGABRT signal")
