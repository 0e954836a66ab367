"""
Article URLs, included inside i18n_patterns (/en/articles/..., /fr/articles/...).
"""

from django.urls import path

from . import views

app_name = "articles"

urlpatterns = [
    path("articles/<slug:slug>/", views.article_detail, name="article_detail"),
]
