"""
Language-neutral content URLs.

Pages carry their locale in the record itself, so their URLs have no
language prefix. Localized article URLs live in pages/urls_articles.py.
"""

from django.urls import path

from . import views

app_name = "pages"

urlpatterns = [
    path("pages/<slug:slug>/", views.page_detail, name="page_detail"),
    path("authors/<slug:slug>/", views.author_detail, name="author_detail"),
]
