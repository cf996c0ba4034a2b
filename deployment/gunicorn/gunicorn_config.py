import os

bind = os.getenv("GUNICORN_BIND", "unix:/var/www/devops-site/gunicorn.sock")
workers = int(os.getenv("GUNICORN_WORKERS", 2))
worker_class = "sync"
worker_tmp_dir = "/dev/shm"
max_requests = 1000
max_requests_jitter = 100
timeout = 30
keepalive = 5

wsgi_app = "core.wsgi:application"

# Logging
accesslog = os.getenv("GUNICORN_ACCESS_LOG", "/var/log/devops-site/access.log")
errorlog = os.getenv("GUNICORN_ERROR_LOG", "/var/log/devops-site/error.log")
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = "devops-site"

# Server mechanics
daemon = False
pidfile = "/var/run/devops-site/gunicorn.pid"
umask = 0o007

# Server hooks
def on_starting(server):
    """Log which settings and database alias the contact form will write to."""
    server.log.info(
        "devops-site starting with %s, contact messages on database alias '%s'",
        os.getenv("DJANGO_SETTINGS_MODULE", "core.settings"),
        os.getenv("CONTACT_DB_ALIAS", "default"),
    )

def worker_abort(worker):
    """A request ran past `timeout`; any contact insert it was making is lost."""
    worker.log.warning(
        "Worker %s aborted after %ss timeout; an in-flight contact submission may not have been stored",
        worker.pid, timeout,
    )
