from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from translatable_sitemaps.models import TranslatableModel


class Page(TranslatableModel):
    """
    Content page stored once per locale.

    Translations of a page share its translation_group; each one has its own
    slug and therefore its own URL.
    """

    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    content = models.TextField(blank=True)
    is_published = models.BooleanField(default=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["pk"]

    def __str__(self):
        return f"{self.title} ({self.locale})"

    def get_absolute_url(self):
        return reverse("pages:page_detail", kwargs={"slug": self.slug})


class Article(models.Model):
    """
    Article with per-language title and body.

    Translated fields are registered in pages/translation.py
    (django-modeltranslation adds title_en, title_de, title_fr, ...).
    """

    title = models.CharField(max_length=200, blank=True, default="")
    body = models.TextField(blank=True, default="")
    slug = models.SlugField(max_length=200, unique=True)
    is_published = models.BooleanField(default=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["pk"]

    def __str__(self):
        return self.title or self.slug

    def get_absolute_url(self):
        return reverse("articles:article_detail", kwargs={"slug": self.slug})


class Author(models.Model):
    """Author profile, not translated."""

    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    bio = models.TextField(blank=True, help_text=_("Short biography"))

    class Meta:
        ordering = ["pk"]

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse("pages:author_detail", kwargs={"slug": self.slug})
