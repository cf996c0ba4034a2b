"""
Contact Views

Form submission endpoint for the contact page.
"""
import logging

from django.http import HttpResponse
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.decorators import method_decorator
from django.utils.html import format_html, format_html_join
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .exceptions import StorageError, ValidationError
from .storage import get_message_store
from .validation import escape_submission, parse_submission

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name='dispatch')
class SubmitMessageView(View):
    """
    Receive the contact form and store it as one ``messages`` row.

    POST /contact/send/

    Any other method is redirected to the contact page without touching
    the database. The static form carries no CSRF token, so the view is
    exempt.

    ``store_factory`` is a callable returning a ``MessageStore``; it is
    called once per request so each request writes through its own
    thread's connection.
    """

    store_factory = staticmethod(get_message_store)

    def dispatch(self, request, *args, **kwargs):
        if request.method != 'POST':
            return redirect('pages:contact')
        return super().dispatch(request, *args, **kwargs)

    def post(self, request):
        """Validate, escape, store and confirm."""
        try:
            submission = escape_submission(parse_submission(request.POST))
        except ValidationError as exc:
            logger.warning("Contact form rejected, invalid fields: %s", ', '.join(sorted(exc.fields)))
            return self.invalid_response(exc)

        try:
            self.store_factory().insert(submission.nom, submission.email, submission.message)
        except StorageError:
            return self.storage_error_response()

        logger.info("Contact message stored from %s", submission.email.rpartition('@')[2] or 'unknown domain')

        # escape() output is SafeString, so nom is not escaped twice.
        return HttpResponse(format_html(
            '<p>Thank you <strong>{}</strong> for your message!</p>\n<a href="{}">Back to home</a>',
            submission.nom,
            reverse('pages:home'),
        ))

    def invalid_response(self, error):
        items = format_html_join(
            '\n', '<li>{}: {}</li>',
            ((name, ' '.join(messages)) for name, messages in sorted(error.fields.items()))
        )
        return HttpResponse(
            format_html(
                '<p>Your message was not sent. Please check the fields below.</p>\n'
                '<ul>\n{}\n</ul>\n<a href="{}">Back to the contact form</a>',
                items,
                reverse('pages:contact'),
            ),
            status=400,
        )

    def storage_error_response(self):
        return HttpResponse(
            format_html(
                '<p>Sorry, your message could not be saved. Please try again later.</p>\n'
                '<a href="{}">Back to home</a>',
                reverse('pages:home'),
            ),
            status=500,
        )
