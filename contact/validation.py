"""
Contact Form Validation

Checks that the three form fields are present and escapes them for
storage and display.
"""
from typing import NamedTuple

from django.utils.html import escape
from rest_framework import serializers

from .exceptions import ValidationError


class Submission(NamedTuple):
    nom: str
    email: str
    message: str


def _not_whitespace(value):
    if not value.strip():
        raise serializers.ValidationError("This field may not be blank.")


class ContactSubmissionSerializer(serializers.Serializer):
    """
    Contact form fields as posted by the contact page.

    Values are kept exactly as typed (no trimming, no format checks);
    only presence is enforced.
    """

    nom = serializers.CharField(
        required=True,
        trim_whitespace=False,
        validators=[_not_whitespace],
        help_text="Name of the sender"
    )

    email = serializers.CharField(
        required=True,
        trim_whitespace=False,
        validators=[_not_whitespace],
        help_text="Email of the sender (presence only)"
    )

    message = serializers.CharField(
        required=True,
        trim_whitespace=False,
        validators=[_not_whitespace],
        help_text="Message content"
    )


def parse_submission(data) -> Submission:
    """
    Validate raw form data.

    Raises:
        ValidationError: if a field is absent, empty or whitespace only.
    """
    serializer = ContactSubmissionSerializer(data=data)
    if not serializer.is_valid():
        fields = {
            name: [str(error) for error in errors]
            for name, errors in serializer.errors.items()
        }
        raise ValidationError(fields)

    return Submission(**serializer.validated_data)


def escape_submission(submission: Submission) -> Submission:
    """HTML-escape every field (& < > " ' become entities)."""
    return Submission(*(escape(value) for value in submission))
