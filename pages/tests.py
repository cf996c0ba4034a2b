"""
Tests for the static pages
"""
import pytest


class TestHomePage:

    def test_home_page_renders(self, client):
        response = client.get('/')

        assert response.status_code == 200
        assert response['Content-Type'] == 'text/html; charset=utf-8'
        body = response.content.decode()
        assert 'Welcome to DevOps' in body
        assert 'href="/contact/"' in body


class TestContactPage:

    def test_contact_form_posts_to_handler(self, client):
        response = client.get('/contact/')

        assert response.status_code == 200
        body = response.content.decode()
        assert 'action="/contact/send/"' in body
        assert 'method="post"' in body
        for field in ('nom', 'email', 'message'):
            assert f'name="{field}"' in body

    def test_contact_form_loads_validation_script(self, client):
        body = client.get('/contact/').content.decode()

        assert '/static/pages/script.js' in body
        assert 'validateForm()' in body

    @pytest.mark.parametrize('url', ['/', '/contact/'])
    def test_pages_reject_post(self, client, url):
        assert client.post(url).status_code == 405
