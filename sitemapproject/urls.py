# sitemapproject/urls.py
"""
Root URL configuration.

Language-neutral: health check, robots.txt, sitemaps, admin, pages and authors.
Language-prefixed (/en/, /de/, /fr/): articles, whose translations live in
per-language columns of a single record.
"""

from django.conf.urls.i18n import i18n_patterns
from django.contrib import admin
from django.urls import include, path

from .urls_shared import base_patterns, sitemap_patterns


urlpatterns = base_patterns + sitemap_patterns + [
    path("admin/", admin.site.urls),
    path("", include("pages.urls", namespace="pages")),
]

urlpatterns += i18n_patterns(
    path("", include("pages.urls_articles", namespace="articles")),

    # Include /en/ prefix even for default language
    prefix_default_language=True,
)
