"""
Contact URL Configuration
"""
from django.urls import path
from .views import SubmitMessageView

app_name = 'contact'

urlpatterns = [
    path('send/', SubmitMessageView.as_view(), name='send'),
]
