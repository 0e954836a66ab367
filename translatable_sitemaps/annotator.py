# translatable_sitemaps/annotator.py
"""
Multilingual sitemap annotations.

Google wants every URL of a multilingual site to list all of its language
versions, itself included:

    <url>
      <loc>https://example.com/en/about/</loc>
      <xhtml:link rel="alternate" hreflang="fr" href="https://example.com/fr/about/"/>
      <xhtml:link rel="alternate" hreflang="en" href="https://example.com/en/about/"/>
    </url>

See https://support.google.com/webmasters/answer/2620865

SitemapLocaleAnnotator walks the entries of a sitemap and gives every
translatable entry a google_locale and an ordered list of alternatives, the
entry itself always last.
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable, Optional

from django.utils import translation

from . import conf
from .capabilities import (
    EntryKind,
    entry_kind,
    get_localizable_fields,
    get_localized_value,
)
from .locales import get_google_locale, locale_filter_disabled

logger = logging.getLogger(__name__)


@dataclass
class LocaleAlternative:
    """
    Lightweight alternative for a field-translated entry.

    Only carries what the sitemap needs: which record it stands for, the
    locale's link and its hreflang value.
    """

    model: type
    pk: object
    locale_absolute_link: str
    google_locale: str

    @classmethod
    def for_entry(cls, entry, link, google_locale):
        return cls(
            model=type(entry),
            pk=entry.pk,
            locale_absolute_link=link,
            google_locale=google_locale,
        )

    @property
    def absolute_link(self):
        return self.locale_absolute_link


class SitemapLocaleAnnotator:
    """
    Adds hreflang alternatives to sitemap entries.

    Usage:
        annotator = SitemapLocaleAnnotator(base_url="https://example.com")
        result = annotator.build(lambda: {"pages": list(PageSitemap().items())})
        for entry in result["items"]:
            entry.google_locale, entry.alternatives
    """

    def __init__(
        self,
        base_url: str = "",
        generic_locales: Optional[Mapping] = None,
        allowed_locales: Optional[list] = None,
        default_locale: Optional[str] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.generic_locales = (
            dict(generic_locales) if generic_locales is not None else conf.generic_locales()
        )
        self.default_locale = default_locale or conf.default_locale()
        if allowed_locales is None:
            allowed_locales = conf.allowed_locales()
        self.allowed_locales = list(allowed_locales)

        self._handlers = {
            EntryKind.FULL_TRANSLATION: self._annotate_full_translation,
            EntryKind.FIELD_TRANSLATION: self._annotate_field_translation,
            EntryKind.UNTRANSLATABLE: None,
        }

    def google_locale(self, locale: str) -> str:
        return get_google_locale(locale, self.generic_locales)

    def link_for(self, entry, locale: Optional[str] = None) -> str:
        """Absolute URL of entry, reversed in locale's language when one is given."""
        if locale is None:
            path = entry.get_absolute_url()
        else:
            with translation.override(locale):
                path = entry.get_absolute_url()
        return f"{self.base_url}{path}"

    @property
    def translation_locales(self) -> list:
        return [locale for locale in self.allowed_locales if locale != self.default_locale]

    def build(self, fetch_sitemap: Callable):
        """
        Fetch the sitemap with records of every locale visible, then annotate it.

        fetch_sitemap must fully evaluate its querysets: anything evaluated
        after it returns sees the locale filter again.
        """
        with locale_filter_disabled():
            sitemap = fetch_sitemap()
        return self.annotate(sitemap)

    def annotate(self, sitemap):
        """
        Annotate every translatable entry of a grouped sitemap.

        Returns {"items": [...]} with all entries flattened in order when at
        least one entry is translatable, otherwise the sitemap unchanged.
        """
        groups = sitemap.values() if isinstance(sitemap, Mapping) else sitemap

        updated_items = []
        translatable_count = 0
        annotated_count = 0
        for items in groups:
            for item in items:
                handler = self._handlers[entry_kind(item)]
                if handler is not None:
                    translatable_count += 1
                    if handler(item):
                        annotated_count += 1
                updated_items.append(item)

        logger.info(
            "Sitemap annotated: %d entries, %d translatable, %d with alternatives",
            len(updated_items), translatable_count, annotated_count,
        )
        if translatable_count:
            return {"items": updated_items}
        return sitemap

    def _annotate_full_translation(self, item) -> bool:
        translations = item.get_translations()
        if not translations:
            return False

        alternatives = []
        for record in translations:
            record.google_locale = self.google_locale(record.locale)
            record.absolute_link = self.link_for(record)
            alternatives.append(record)

        item.google_locale = self.google_locale(item.locale)
        item.absolute_link = self.link_for(item)
        alternatives.append(item)
        item.alternatives = alternatives

        logger.debug(
            "%s #%s: %d alternatives", type(item).__name__, item.pk, len(alternatives)
        )
        return True

    def _annotate_field_translation(self, item) -> bool:
        fields = get_localizable_fields(type(item))

        alternatives = []
        for locale in self.translation_locales:
            if not self._is_translated(item, fields, locale):
                continue
            alternatives.append(
                LocaleAlternative.for_entry(
                    item,
                    link=self.link_for(item, locale),
                    google_locale=self.google_locale(locale),
                )
            )

        if not alternatives:
            return False

        item.google_locale = self.google_locale(self.default_locale)
        item.absolute_link = self.link_for(item, self.default_locale)
        alternatives.append(item)
        item.alternatives = alternatives

        logger.debug(
            "%s #%s: %d alternatives", type(item).__name__, item.pk, len(alternatives)
        )
        return True

    @staticmethod
    def _is_translated(item, fields, locale) -> bool:
        return any(
            get_localized_value(item, field, locale, strict=True).value
            for field in fields
        )
