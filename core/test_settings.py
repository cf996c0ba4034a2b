"""
Settings for the pytest run.

Uses an in-memory SQLite database so tests need no running PostgreSQL.
"""
import os

os.environ.setdefault('SECRET_KEY', 'test-secret-key-not-for-production')
os.environ.setdefault('DEBUG', 'True')

from .settings import *  # noqa: E402,F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CONTACT_DB_ALIAS = 'default'

LOGGING['root']['level'] = 'WARNING'  # noqa: F405
