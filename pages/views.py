"""
Static page views.

Pages are plain HTML files under ``pages/html`` returned as-is.
"""
from pathlib import Path

from django.http import HttpResponse
from django.views import View

HTML_DIR = Path(__file__).resolve().parent / 'html'


class StaticPageView(View):
    """Serve one HTML file from ``HTML_DIR`` on GET."""

    http_method_names = ['get', 'head']
    page = None

    def get(self, request):
        content = (HTML_DIR / self.page).read_text(encoding='utf-8')
        return HttpResponse(content, content_type='text/html; charset=utf-8')


class HomePageView(StaticPageView):
    page = 'index.html'


class ContactPageView(StaticPageView):
    page = 'contact.html'
