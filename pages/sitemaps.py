# pages/sitemaps.py
"""
Sitemap sections for site content.

Served by translatable_sitemaps.views, which evaluates items() with the
locale filter disabled so that pages in every locale are listed, each with
hreflang alternates for its translations.
"""

from django.contrib.sitemaps import Sitemap

from .models import Article, Author, Page


class PageSitemap(Sitemap):
    """Published pages (all locales when the locale filter is off)."""

    changefreq = "weekly"
    priority = 0.8

    def items(self):
        return Page.objects.filter(is_published=True).order_by("pk")

    def lastmod(self, obj):
        return obj.updated_at


class ArticleSitemap(Sitemap):
    """Published articles; languages are listed as alternates of one URL each."""

    changefreq = "weekly"
    priority = 0.7

    def items(self):
        return Article.objects.filter(is_published=True).order_by("pk")

    def lastmod(self, obj):
        return obj.updated_at


class AuthorSitemap(Sitemap):
    """Author profiles."""

    changefreq = "monthly"
    priority = 0.4

    def items(self):
        return Author.objects.order_by("pk")


# Dictionary for use in URL configuration
site_sitemaps = {
    "pages": PageSitemap,
    "articles": ArticleSitemap,
    "authors": AuthorSitemap,
}
