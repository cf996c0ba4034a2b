"""
Message Storage

Writes contact form submissions into the ``messages`` table through a
Django database connection.
"""
import logging

from django.conf import settings
from django.db import Error as DatabaseDriverError, connections

from .exceptions import StorageError

logger = logging.getLogger(__name__)


class MessageStore:
    """
    Insert-only store for contact messages.

    The connection is handed in by the caller; the store never opens,
    pools or closes connections itself.
    """

    # Values are bound by the driver, never interpolated into the SQL.
    INSERT_SQL = 'INSERT INTO messages (nom, email, message) VALUES (%s, %s, %s)'

    def __init__(self, connection):
        self.connection = connection

    def insert(self, nom: str, email: str, message: str) -> None:
        """
        Insert one message row.

        Raises:
            StorageError: if the database rejects the insert or is unreachable.
        """
        try:
            with self.connection.cursor() as cursor:
                cursor.execute(self.INSERT_SQL, [nom, email, message])
        except DatabaseDriverError as exc:
            logger.exception(
                "Failed to store contact message on database '%s'",
                self.connection.alias
            )
            raise StorageError("Message could not be stored") from exc


def get_message_store(alias=None) -> MessageStore:
    """Build a store bound to the current thread's connection for ``alias``."""
    alias = alias or settings.CONTACT_DB_ALIAS
    return MessageStore(connections[alias])
