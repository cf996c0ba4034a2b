"""
Shared pytest fixtures.
"""
import pytest
from django.core.management import call_command


@pytest.fixture(scope='session')
def django_db_setup(django_db_setup, django_db_blocker):
    """Provision the unmanaged messages table once per test database."""
    with django_db_blocker.unblock():
        call_command('create_messages_table', verbosity=0)
