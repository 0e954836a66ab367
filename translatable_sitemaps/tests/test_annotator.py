"""
Tests for SitemapLocaleAnnotator.

Covers both translation capabilities:
- Page: one record per locale (TranslatableModel)
- Article: per-language columns (django-modeltranslation)
and untranslatable records (Author), which pass through.
"""

import pytest
from django.test import TestCase, override_settings
from django.utils import translation

from pages.models import Article, Author, Page
from pages.sitemaps import site_sitemaps
from translatable_sitemaps.annotator import LocaleAlternative, SitemapLocaleAnnotator
from translatable_sitemaps.capabilities import (
    EntryKind,
    entry_kind,
    get_localizable_fields,
    get_localized_value,
    has_capability,
)
from translatable_sitemaps.locales import locale_filter_disabled, locale_filter_enabled


def make_annotator(**kwargs):
    options = {
        "base_url": "http://testserver",
        "generic_locales": {"fr_FR": "fr"},
        "allowed_locales": ["en", "de", "fr"],
        "default_locale": "en",
    }
    options.update(kwargs)
    return SitemapLocaleAnnotator(**options)


class CapabilityTests(TestCase):
    """Entries are classified by how their translations are stored."""

    def test_entry_kinds(self):
        page = Page.objects.create(locale="en", title="Home", slug="home")
        article = Article.objects.create(title_en="News", slug="news")
        author = Author.objects.create(name="Ada", slug="ada")

        self.assertEqual(entry_kind(page), EntryKind.FULL_TRANSLATION)
        self.assertEqual(entry_kind(article), EntryKind.FIELD_TRANSLATION)
        self.assertEqual(entry_kind(author), EntryKind.UNTRANSLATABLE)

        self.assertTrue(has_capability(page, "full-translation"))
        self.assertFalse(has_capability(page, "field-translation"))
        self.assertTrue(has_capability(article, "field-translation"))
        self.assertFalse(has_capability(author, "full-translation"))

    def test_localizable_fields(self):
        self.assertEqual(get_localizable_fields(Article), ["title", "body"])
        self.assertEqual(get_localizable_fields(Author), [])

    def test_strict_localized_value_does_not_fall_back(self):
        article = Article.objects.create(title_en="News", slug="news")

        strict = get_localized_value(article, "title", "fr", strict=True)
        self.assertFalse(strict.value)
        self.assertIsNone(strict.source)

        fallback = get_localized_value(article, "title", "fr", strict=False)
        self.assertEqual(fallback.value, "News")
        self.assertEqual(fallback.source, "en")

    def test_localized_value_reports_its_locale(self):
        article = Article.objects.create(title_en="News", title_fr="Actualites", slug="news")
        value = get_localized_value(article, "title", "fr")
        self.assertEqual(value.value, "Actualites")
        self.assertEqual(value.source, "fr")


class FullTranslationTests(TestCase):
    """Pages: translations are separate records."""

    def setUp(self):
        self.page = Page.objects.create(locale="en", title="About", slug="about")
        self.fr = self.page.create_translation("fr_FR", title="A propos", slug="a-propos")
        self.de = self.page.create_translation("de_DE", title="Uber uns", slug="uber-uns")

    def test_alternatives_are_translations_then_self(self):
        result = make_annotator().annotate({"pages": [self.page]})

        entry = result["items"][0]
        self.assertIs(entry, self.page)
        self.assertEqual(
            [(alt.pk, alt.google_locale) for alt in entry.alternatives],
            [(self.fr.pk, "fr"), (self.de.pk, "de_de"), (self.page.pk, "en")],
        )
        self.assertIs(entry.alternatives[-1], self.page)
        self.assertEqual(entry.google_locale, "en")

    def test_alternatives_count_is_translations_plus_one(self):
        result = make_annotator().annotate([[self.page]])
        alternatives = result["items"][0].alternatives

        self.assertEqual(len(alternatives), len(self.page.get_translations()) + 1)
        own = [alt for alt in alternatives if alt.pk == self.page.pk]
        self.assertEqual(len(own), 1)

    def test_alternatives_carry_their_own_links(self):
        result = make_annotator().annotate([[self.page]])
        links = [alt.absolute_link for alt in result["items"][0].alternatives]
        self.assertEqual(
            links,
            [
                "http://testserver/pages/a-propos/",
                "http://testserver/pages/uber-uns/",
                "http://testserver/pages/about/",
            ],
        )

    def test_page_without_translations_is_not_annotated(self):
        lonely = Page.objects.create(locale="en", title="Imprint", slug="imprint")
        result = make_annotator().annotate([[lonely]])

        self.assertEqual(result, {"items": [lonely]})
        self.assertFalse(hasattr(lonely, "alternatives"))
        self.assertFalse(hasattr(lonely, "google_locale"))

    def test_every_locale_is_listed_with_filter_disabled(self):
        sitemap = site_sitemaps["pages"]()
        result = make_annotator().build(lambda: {"pages": list(sitemap.items())})

        self.assertEqual(
            [item.pk for item in result["items"]],
            [self.page.pk, self.fr.pk, self.de.pk],
        )
        fr_entry = result["items"][1]
        self.assertEqual(
            [alt.google_locale for alt in fr_entry.alternatives],
            ["en", "de_de", "fr"],
        )

    def test_filter_enabled_hides_other_locales(self):
        with translation.override("en"):
            self.assertEqual(list(Page.objects.all()), [self.page])
        with translation.override("fr-fr"):
            self.assertEqual(list(Page.objects.all()), [self.fr])
        with locale_filter_disabled():
            self.assertEqual(Page.objects.count(), 3)


class FieldTranslationTests(TestCase):
    """Articles: translations are per-language columns of one record."""

    def test_translated_locale_gets_locale_alternative(self):
        article = Article.objects.create(
            title_en="Hello", title_fr="Bonjour", slug="hello"
        )
        result = make_annotator().annotate({"articles": [article]})

        entry = result["items"][0]
        self.assertEqual(len(entry.alternatives), 2)

        alternative = entry.alternatives[0]
        self.assertIsInstance(alternative, LocaleAlternative)
        self.assertIs(alternative.model, Article)
        self.assertEqual(alternative.pk, article.pk)
        self.assertEqual(alternative.google_locale, "fr")
        self.assertEqual(
            alternative.locale_absolute_link, "http://testserver/fr/articles/hello/"
        )

        self.assertIs(entry.alternatives[-1], article)
        self.assertEqual(article.google_locale, "en")
        self.assertEqual(article.absolute_link, "http://testserver/en/articles/hello/")

    def test_any_field_counts_as_translation(self):
        article = Article.objects.create(
            title_en="Hello", body_en="Text", body_de="Inhalt", slug="hello"
        )
        result = make_annotator().annotate([[article]])
        self.assertEqual(
            [alt.google_locale for alt in result["items"][0].alternatives],
            ["de", "en"],
        )

    def test_locales_follow_allowed_locales_order(self):
        article = Article.objects.create(
            title_en="Hello", title_de="Hallo", title_fr="Bonjour", slug="hello"
        )
        annotator = make_annotator(allowed_locales=["fr", "en", "de"])
        result = annotator.annotate([[article]])
        self.assertEqual(
            [alt.google_locale for alt in result["items"][0].alternatives],
            ["fr", "de", "en"],
        )

    def test_translation_in_earlier_locale_only_still_adds_self(self):
        """A translation into any locale counts, not only the last one checked."""
        article = Article.objects.create(title_en="Hello", title_de="Hallo", slug="hello")
        result = make_annotator().annotate([[article]])

        alternatives = result["items"][0].alternatives
        self.assertEqual([alt.google_locale for alt in alternatives], ["de", "en"])
        self.assertIs(alternatives[-1], article)

    def test_untranslated_article_is_not_annotated(self):
        article = Article.objects.create(title_en="Hello", slug="hello")
        result = make_annotator().annotate([[article]])

        self.assertEqual(result, {"items": [article]})
        self.assertFalse(hasattr(article, "alternatives"))

    def test_active_language_is_restored(self):
        article = Article.objects.create(title_en="Hello", title_fr="Bonjour", slug="hello")
        with translation.override("de"):
            make_annotator().annotate([[article]])
            self.assertEqual(translation.get_language(), "de")


class ResultAssemblyTests(TestCase):
    """Flattening and the wrapped / unchanged result."""

    def test_untranslatable_entries_are_kept_in_order(self):
        author = Author.objects.create(name="Ada", slug="ada")
        page = Page.objects.create(locale="en", title="About", slug="about")
        page.create_translation("fr_FR", title="A propos", slug="a-propos")
        article = Article.objects.create(title_en="Hello", slug="hello")

        result = make_annotator().annotate(
            {"authors": [author], "pages": [page], "articles": [article]}
        )
        self.assertEqual(result["items"], [author, page, article])
        self.assertFalse(hasattr(author, "alternatives"))

    def test_sitemap_without_translatable_entries_is_returned_unchanged(self):
        author = Author.objects.create(name="Ada", slug="ada")
        sitemap = {"authors": [author]}

        result = make_annotator().annotate(sitemap)
        self.assertIs(result, sitemap)
        self.assertEqual(result, {"authors": [author]})

    def test_empty_sitemap_is_returned_unchanged(self):
        sitemap = {}
        self.assertIs(make_annotator().annotate(sitemap), sitemap)

    def test_build_restores_state_after_processing(self):
        Article.objects.create(title_en="Hello", title_fr="Bonjour", slug="hello")
        Article.objects.create(title_en="World", title_de="Welt", slug="world")

        with translation.override("en"):
            result = make_annotator().build(
                lambda: {"articles": list(Article.objects.order_by("pk"))}
            )
            self.assertEqual(translation.get_language(), "en")
        self.assertEqual(len(result["items"]), 2)
        self.assertTrue(locale_filter_enabled())

    def test_build_restores_filter_when_fetch_fails(self):
        def failing_fetch():
            self.assertFalse(locale_filter_enabled())
            raise RuntimeError("database unavailable")

        with self.assertRaises(RuntimeError):
            make_annotator().build(failing_fetch)
        self.assertTrue(locale_filter_enabled())

    def test_summary_is_logged(self):
        author = Author.objects.create(name="Ada", slug="ada")
        with self.assertLogs("translatable_sitemaps.annotator", level="INFO") as logs:
            make_annotator().annotate([[author]])
        self.assertIn("1 entries, 0 translatable", logs.output[0])

    @override_settings(
        TRANSLATABLE_SITEMAP_GENERIC_LOCALES={"fr_FR": "fr"},
        TRANSLATABLE_SITEMAP_ALLOWED_LOCALES=["en", "fr"],
    )
    def test_defaults_come_from_settings(self):
        annotator = SitemapLocaleAnnotator()
        self.assertEqual(annotator.generic_locales, {"fr_FR": "fr"})
        self.assertEqual(annotator.default_locale, "en")
        self.assertEqual(annotator.translation_locales, ["fr"])
        self.assertEqual(annotator.google_locale("fr_FR"), "fr")


# Scenarios written against the conftest fixtures


def test_end_to_end_page_scenario(annotator, translated_page):
    result = annotator.annotate({"pages": [translated_page]})

    entry = result["items"][0]
    assert entry.google_locale == "en"
    assert [(alt.locale, alt.google_locale) for alt in entry.alternatives] == [
        ("fr_FR", "fr"),
        ("de_DE", "de_de"),
        ("en", "en"),
    ]


def test_end_to_end_untranslatable_scenario(annotator, author):
    sitemap = {"authors": [author]}
    assert annotator.annotate(sitemap) is sitemap


@pytest.mark.django_db
def test_translation_helpers(translated_page):
    assert translated_page.has_translation("fr_FR")
    assert not translated_page.has_translation("nl_NL")
    assert [p.locale for p in translated_page.get_translations()] == ["fr_FR", "de_DE"]
