# sitemapproject/views_seo.py
"""
SEO-related views.

robots.txt points crawlers at the sitemap index, which lists one sitemap per
content section with hreflang alternates for every translation.
"""

from django.http import HttpResponse
from django.urls import reverse
from django.views.decorators.cache import cache_page
from django.views.decorators.http import require_GET


@require_GET
@cache_page(60 * 60 * 24)  # Cache for 24 hours
def robots_txt(request):
    """
    Generate robots.txt for search engine crawlers.

    Allows crawling of public content, blocks the admin and references the
    sitemap index on the requesting host.
    """
    sitemap_url = request.build_absolute_uri(reverse("sitemap_index"))
    lines = [
        "User-agent: *",
        "",
        "# Allow public pages",
        "Allow: /",
        "",
        "# Block admin and health check",
        "Disallow: /admin/",
        "Disallow: /healthz/",
        "",
        "# Sitemap location",
        f"Sitemap: {sitemap_url}",
        "",
    ]

    return HttpResponse("\n".join(lines), content_type="text/plain")
