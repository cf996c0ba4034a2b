"""
Create Messages Table Command

Provisions the ``messages`` table the contact form writes into. The
table is not handled by migrations, so run this once per database.

Usage:
    python manage.py create_messages_table                     # default contact database
    python manage.py create_messages_table --database replica  # specific alias
"""
from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import connections

from contact.models import Message


class Command(BaseCommand):
    help = 'Create the messages table used by the contact form if it does not exist'

    def add_arguments(self, parser):
        parser.add_argument(
            '--database',
            default=None,
            help='Database alias (defaults to CONTACT_DB_ALIAS)',
        )

    def handle(self, *args, **options):
        alias = options['database'] or settings.CONTACT_DB_ALIAS
        connection = connections[alias]
        table = Message._meta.db_table

        if table in connection.introspection.table_names():
            self.stdout.write(f'Table "{table}" already exists on "{alias}", nothing to do')
            return

        with connection.schema_editor() as schema_editor:
            schema_editor.create_model(Message)

        self.stdout.write(self.style.SUCCESS(f'✓ Created table "{table}" on "{alias}"'))
