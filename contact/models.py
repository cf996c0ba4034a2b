"""
Contact Models

Schema for contact form submissions.
"""
from django.db import models
from django.db.models.functions import Now


class Message(models.Model):
    """
    One contact form submission.

    Rows are written once by ``MessageStore`` and never read back by the
    site. The table is not managed by migrations; it is provisioned with
    ``manage.py create_messages_table``.
    """

    # Text columns: escaping can make a value longer than what was typed.
    nom = models.TextField(
        help_text="Sender name, HTML-escaped"
    )

    email = models.TextField(
        help_text="Sender email, HTML-escaped"
    )

    message = models.TextField(
        help_text="Message body, HTML-escaped"
    )

    created_at = models.DateTimeField(
        db_default=Now(),
        help_text="When the message was stored"
    )

    class Meta:
        managed = False
        db_table = 'messages'
        verbose_name = 'Message'
        verbose_name_plural = 'Messages'

    def __str__(self):
        return f"{self.nom} <{self.email}>"
