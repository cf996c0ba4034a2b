"""
URL configuration for the DevOps contact site.

    /                 home page
    /contact/         contact form
    /contact/send/    form submission handler
"""
from django.urls import path, include

urlpatterns = [
    path('', include('pages.urls')),
    path('contact/', include('contact.urls')),
]
