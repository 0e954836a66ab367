# translatable_sitemaps/views.py
"""
Sitemap views with hreflang alternates.

- index: the standard Django sitemap index
- sitemap: a section (or all sections) with every locale's records and
  <xhtml:link rel="alternate"> elements for their translations

Wire them up with the same sitemaps dict Django's own views take:

    path("sitemap.xml", views.index,
         {"sitemaps": sitemaps, "sitemap_url_name": "sitemap_section"}),
    path("sitemap-<section>.xml", views.sitemap,
         {"sitemaps": sitemaps}, name="sitemap_section"),
"""
import logging

from django.contrib.sitemaps import views as sitemap_views
from django.contrib.sites.shortcuts import get_current_site
from django.http import Http404
from django.template.response import TemplateResponse
from django.utils import translation
from django.views.decorators.http import require_GET

from .annotator import SitemapLocaleAnnotator

logger = logging.getLogger(__name__)


@require_GET
def index(request, sitemaps, **kwargs):
    """Sitemap index, rendered by django.contrib.sitemaps."""
    return sitemap_views.index(request, sitemaps, **kwargs)


def _select_sections(sitemaps, section):
    if section is None:
        selected = sitemaps
    elif section in sitemaps:
        selected = {section: sitemaps[section]}
    else:
        raise Http404(f"No sitemap available for section: {section!r}")

    sites = {}
    for name, site in selected.items():
        if callable(site):
            site = site()
        sites[name] = site
    return sites


def _site_value(site, name, item):
    """A Sitemap attribute, or its per-item method, the way Django's Sitemap._get() reads it."""
    attr = getattr(site, name, None)
    if callable(attr):
        return attr(item)
    return attr


def _url_info(entry, site, annotator, protocol, domain):
    location = getattr(entry, "absolute_link", None)
    if not location:
        location = f"{site.get_protocol(protocol)}://{domain}{site.location(entry)}"

    alternatives = [
        {
            "hreflang": alternative.google_locale,
            "href": getattr(alternative, "absolute_link", None) or annotator.link_for(alternative),
        }
        for alternative in getattr(entry, "alternatives", None) or []
    ]
    priority = _site_value(site, "priority", entry)
    return {
        "location": location,
        "lastmod": _site_value(site, "lastmod", entry),
        "changefreq": _site_value(site, "changefreq", entry),
        "priority": str(priority) if priority is not None else "",
        "alternatives": alternatives,
    }


@require_GET
@sitemap_views.x_robots_tag
def sitemap(
    request,
    sitemaps,
    section=None,
    template_name="translatable_sitemaps/sitemap.xml",
    content_type="application/xml",
):
    """
    Render one sitemap section, or all of them, with hreflang alternates.

    Records of every locale are listed: the section's items() are evaluated
    while the locale filter is disabled. URLs are reversed in the default
    locale, so the output does not depend on the crawler's Accept-Language.
    """
    sites = _select_sections(sitemaps, section)
    protocol = request.scheme
    domain = get_current_site(request).domain
    annotator = SitemapLocaleAnnotator(base_url=f"{protocol}://{domain}")

    grouped = {}
    site_of = {}

    def fetch_sitemap():
        for name, site in sites.items():
            grouped[name] = list(site.items())
            for item in grouped[name]:
                site_of[id(item)] = site
        return grouped

    with translation.override(annotator.default_locale):
        sitemap_data = annotator.build(fetch_sitemap)
        if sitemap_data is grouped:
            entries = [entry for items in grouped.values() for entry in items]
        else:
            entries = sitemap_data["items"]

        urlset = [
            _url_info(entry, site_of[id(entry)], annotator, protocol, domain)
            for entry in entries
        ]
    logger.debug("Rendering sitemap section=%s with %d urls", section, len(urlset))

    return TemplateResponse(
        request,
        template_name,
        {"urlset": urlset},
        content_type=content_type,
    )
