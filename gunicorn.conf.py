"""
Gunicorn configuration file
Đặt file này cùng cấp với run.py:  gunicorn -c gunicorn.conf.py run:app
"""

import os

# ==================== WORKER CONFIGURATION ====================
# One process: the SQLite file and store handle are owned by a single worker
workers = 1

# Threads per worker; requests may overlap but never coordinate
threads = 4

worker_class = 'gthread'

# ==================== TIMEOUT ====================
timeout = 30
graceful_timeout = 30
keepalive = 5

# ==================== PRELOAD ====================
# create_app() seeds the store before the worker accepts traffic
preload_app = True

# ==================== BINDING ====================
bind = f"0.0.0.0:{os.environ.get('PORT', '3000')}"

# ==================== LOGGING ====================
accesslog = '-'  # Log to stdout
errorlog = '-'   # Log to stderr
loglevel = 'info'


# ==================== HOOKS ====================
def on_starting(server):
    server.log.info(f"[Gunicorn] Starting quiz backend: workers={workers}, threads={threads}, bind={bind}")


def worker_exit(server, worker):
    server.log.info(f"[Worker {worker.pid}] Exited")
