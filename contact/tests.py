"""
Tests for the contact form submission handler
"""
from io import StringIO

import pytest
from django.core.management import call_command
from django.db import InterfaceError, OperationalError, connection
from django.test import RequestFactory
from django.utils.html import escape

from contact.exceptions import StorageError, ValidationError
from contact.models import Message
from contact.storage import MessageStore, get_message_store
from contact.validation import Submission, escape_submission, parse_submission
from contact.views import SubmitMessageView

pytestmark = pytest.mark.django_db

SUBMIT_URL = '/contact/send/'


@pytest.fixture
def valid_form():
    return {
        'nom': 'Ann & Co',
        'email': 'a@b.com',
        'message': 'Hi <b>there</b>',
    }


class RecordingStore:
    """Stands in for MessageStore and remembers every insert."""

    def __init__(self):
        self.rows = []

    def insert(self, nom, email, message):
        self.rows.append((nom, email, message))


class BrokenConnection:
    """Connection whose cursor cannot be opened."""

    alias = 'broken'

    def cursor(self):
        raise OperationalError('could not connect to server')


class ClosedConnection:
    """Connection dropped by the server between requests."""

    alias = 'closed'

    def cursor(self):
        raise InterfaceError('connection already closed')


class TestMethodGuard:
    """Anything but POST goes back to the contact page."""

    @pytest.mark.parametrize('method', ['get', 'put', 'patch', 'delete', 'head'])
    def test_non_post_redirects_to_contact_page(self, client, method):
        response = getattr(client, method)(SUBMIT_URL)

        assert response.status_code == 302
        assert response['Location'] == '/contact/'
        assert response.content == b''
        assert Message.objects.count() == 0

    def test_get_with_query_string_stores_nothing(self, client, valid_form):
        response = client.get(SUBMIT_URL, valid_form)

        assert response.status_code == 302
        assert Message.objects.count() == 0

    def test_non_post_never_builds_a_store(self):
        calls = []

        def store_factory():
            calls.append(True)
            return RecordingStore()

        view = SubmitMessageView.as_view(store_factory=store_factory)
        response = view(RequestFactory().get(SUBMIT_URL))

        assert response.status_code == 302
        assert calls == []


class TestSubmission:
    """Valid POST stores one escaped row and confirms."""

    def test_scenario_ann_and_co(self, client, valid_form):
        response = client.post(SUBMIT_URL, valid_form)

        assert response.status_code == 200
        body = response.content.decode()
        assert 'Thank you <strong>Ann &amp; Co</strong> for your message!' in body
        assert '<a href="/">Back to home</a>' in body

        row = Message.objects.get()
        assert row.nom == 'Ann &amp; Co'
        assert row.email == 'a@b.com'
        assert row.message == 'Hi &lt;b&gt;there&lt;/b&gt;'

    def test_script_tags_are_never_stored_or_rendered_raw(self, client):
        payload = '<script>alert("x")</script>'
        response = client.post(SUBMIT_URL, {
            'nom': payload,
            'email': payload,
            'message': payload,
        })

        assert response.status_code == 200
        assert '<script>' not in response.content.decode()

        row = Message.objects.get()
        for value in (row.nom, row.email, row.message):
            assert '<' not in value
            assert '>' not in value
            assert '&lt;script&gt;' in value

    def test_sql_metacharacters_are_stored_as_data(self, client, valid_form):
        payload = "'; DROP TABLE messages; --"
        valid_form['nom'] = payload
        valid_form['message'] = payload

        response = client.post(SUBMIT_URL, valid_form)

        assert response.status_code == 200
        assert 'messages' in connection.introspection.table_names()
        row = Message.objects.get()
        assert row.nom == escape(payload)
        assert row.message == escape(payload)

    def test_resubmission_creates_duplicate_rows(self, client, valid_form):
        client.post(SUBMIT_URL, valid_form)
        client.post(SUBMIT_URL, valid_form)

        rows = list(Message.objects.order_by('id'))
        assert len(rows) == 2
        assert rows[0].id != rows[1].id
        assert (rows[0].nom, rows[0].email, rows[0].message) == (rows[1].nom, rows[1].email, rows[1].message)

    def test_store_assigns_timestamp(self, client, valid_form):
        client.post(SUBMIT_URL, valid_form)

        assert Message.objects.get().created_at is not None

    def test_values_are_not_trimmed(self, client, valid_form):
        valid_form['nom'] = '  Ann  '

        client.post(SUBMIT_URL, valid_form)

        assert Message.objects.get().nom == '  Ann  '

    def test_injected_store_receives_escaped_values(self, valid_form):
        store = RecordingStore()
        view = SubmitMessageView.as_view(store_factory=lambda: store)

        response = view(RequestFactory().post(SUBMIT_URL, valid_form))

        assert response.status_code == 200
        assert store.rows == [('Ann &amp; Co', 'a@b.com', 'Hi &lt;b&gt;there&lt;/b&gt;')]
        assert Message.objects.count() == 0


class TestMissingFields:
    """Absent or blank fields are rejected before anything is stored."""

    @pytest.mark.parametrize('missing', ['nom', 'email', 'message'])
    def test_absent_field_returns_400(self, client, valid_form, missing):
        del valid_form[missing]

        response = client.post(SUBMIT_URL, valid_form)

        assert response.status_code == 400
        body = response.content.decode()
        assert f'<li>{missing}:' in body
        assert '<a href="/contact/">Back to the contact form</a>' in body
        assert Message.objects.count() == 0

    def test_empty_post_lists_every_field(self, client):
        response = client.post(SUBMIT_URL, {})

        body = response.content.decode()
        assert response.status_code == 400
        for field in ('nom', 'email', 'message'):
            assert f'<li>{field}:' in body

    def test_null_character_is_reported_as_invalid(self, client, valid_form, caplog):
        valid_form['nom'] = 'A\x00B'

        response = client.post(SUBMIT_URL, valid_form)

        body = response.content.decode()
        assert response.status_code == 400
        assert 'Please check the fields below.' in body
        assert 'fill in every field' not in body
        assert '<li>nom: Null characters are not allowed.</li>' in body
        assert 'invalid fields: nom' in caplog.text
        assert Message.objects.count() == 0

    def test_whitespace_only_counts_as_missing(self, client, valid_form):
        valid_form['message'] = '   \n\t'

        response = client.post(SUBMIT_URL, valid_form)

        assert response.status_code == 400
        assert Message.objects.count() == 0


class TestStorageFailure:
    """Insert failures become a generic 500 and are logged."""

    def test_broken_connection_returns_generic_500(self, valid_form, caplog):
        view = SubmitMessageView.as_view(store_factory=lambda: MessageStore(BrokenConnection()))

        response = view(RequestFactory().post(SUBMIT_URL, valid_form))

        assert response.status_code == 500
        body = response.content.decode()
        assert 'could not be saved' in body
        assert 'could not connect to server' not in body
        assert 'Failed to store contact message' in caplog.text
        assert 'could not connect to server' in caplog.text

    def test_store_wraps_database_error(self):
        store = MessageStore(BrokenConnection())

        with pytest.raises(StorageError) as exc_info:
            store.insert('Ann', 'a@b.com', 'Hello')

        assert isinstance(exc_info.value.__cause__, OperationalError)

    def test_closed_connection_returns_generic_500(self, valid_form, caplog):
        view = SubmitMessageView.as_view(store_factory=lambda: MessageStore(ClosedConnection()))

        response = view(RequestFactory().post(SUBMIT_URL, valid_form))

        assert response.status_code == 500
        body = response.content.decode()
        assert 'could not be saved' in body
        assert 'connection already closed' not in body
        assert 'connection already closed' in caplog.text

    def test_store_wraps_interface_error(self):
        with pytest.raises(StorageError) as exc_info:
            MessageStore(ClosedConnection()).insert('Ann', 'a@b.com', 'Hello')

        assert isinstance(exc_info.value.__cause__, InterfaceError)


class TestMessageStore:
    """Direct use of the insert-only store."""

    def test_insert_writes_exactly_one_row(self):
        get_message_store().insert('Ann', 'a@b.com', 'Hello')

        row = Message.objects.get()
        assert (row.nom, row.email, row.message) == ('Ann', 'a@b.com', 'Hello')

    def test_default_store_uses_configured_alias(self, settings):
        settings.CONTACT_DB_ALIAS = 'default'

        assert get_message_store().connection.alias == 'default'

    def test_insert_uses_placeholders(self):
        assert MessageStore.INSERT_SQL == 'INSERT INTO messages (nom, email, message) VALUES (%s, %s, %s)'


class TestValidation:
    """parse_submission / escape_submission without HTTP."""

    def test_parse_returns_values_unchanged(self):
        submission = parse_submission({'nom': ' Ann ', 'email': 'not-an-email', 'message': 'Hi'})

        assert submission == Submission(' Ann ', 'not-an-email', 'Hi')

    def test_parse_reports_every_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_submission({'nom': 'Ann'})

        assert set(exc_info.value.fields) == {'email', 'message'}

    def test_escape_converts_quotes_and_ampersands(self):
        escaped = escape_submission(Submission('"Ann" & \'Co\'', '<a@b.com>', 'x'))

        assert escaped.nom == '&quot;Ann&quot; &amp; &#x27;Co&#x27;'
        assert escaped.email == '&lt;a@b.com&gt;'
        assert hasattr(escaped.nom, '__html__')


class TestCreateMessagesTableCommand:
    """Schema provisioning command."""

    def test_existing_table_is_left_alone(self):
        out = StringIO()

        call_command('create_messages_table', stdout=out)

        assert 'already exists' in out.getvalue()
        assert 'messages' in connection.introspection.table_names()
