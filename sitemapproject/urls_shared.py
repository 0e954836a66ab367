"""
Shared URL patterns, language-neutral (no /en/, /de/, /fr/ prefix).

Usage:
    from .urls_shared import base_patterns

    urlpatterns = base_patterns + [
        # Site-specific patterns here
    ]
"""
from django.http import HttpResponse
from django.urls import path

from pages.sitemaps import site_sitemaps
from translatable_sitemaps import views as sitemap_views

from .views_seo import robots_txt


def health_check(request):
    """
    Health check endpoint for load balancer probes.

    Returns HTTP 200 "OK". Must be accessible without authentication.
    """
    return HttpResponse("OK")


base_patterns = [
    path('healthz/', health_check, name='health_check'),
    path('robots.txt', robots_txt, name='robots_txt'),
]

# Sitemaps must stay outside i18n_patterns: each one lists every language
sitemap_patterns = [
    path(
        'sitemap.xml',
        sitemap_views.index,
        {'sitemaps': site_sitemaps, 'sitemap_url_name': 'sitemap_section'},
        name='sitemap_index',
    ),
    path(
        'sitemap-<section>.xml',
        sitemap_views.sitemap,
        {'sitemaps': site_sitemaps},
        name='sitemap_section',
    ),
]
