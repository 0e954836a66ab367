"""
Tests for site content: detail pages, admin, robots.txt and health check.

Articles are served under i18n_patterns (/en/, /de/, /fr/); pages and
authors are language-neutral.
"""

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.test import Client, TestCase
from django.utils import translation

from translatable_sitemaps.locales import locale_filter_disabled

from .models import Article, Author, Page
from .sitemaps import site_sitemaps

User = get_user_model()


class PageModelTestCase(TestCase):
    """Pages are stored once per locale and grouped by translation_group."""

    def setUp(self):
        self.page = Page.objects.create(locale="en", title="About", slug="about")

    def test_translation_shares_group(self):
        translation_fr = self.page.create_translation("fr", title="A propos", slug="a-propos")
        self.assertEqual(translation_fr.translation_group, self.page.translation_group)
        self.assertEqual(translation_fr.locale, "fr")

    def test_get_translations_excludes_self(self):
        self.page.create_translation("fr", title="A propos", slug="a-propos")
        self.page.create_translation("de", title="Uber uns", slug="uber-uns")
        self.assertEqual(
            [p.locale for p in self.page.get_translations()], ["fr", "de"]
        )

    def test_unrelated_pages_are_not_translations(self):
        Page.objects.create(locale="fr", title="Contact", slug="contact")
        self.assertEqual(self.page.get_translations(), [])

    def test_default_manager_follows_active_language(self):
        self.page.create_translation("de", title="Uber uns", slug="uber-uns")
        with translation.override("de"):
            self.assertEqual([p.slug for p in Page.objects.all()], ["uber-uns"])
        with locale_filter_disabled():
            self.assertEqual(Page.objects.count(), 2)
        self.assertEqual(Page.all_locales.count(), 2)

    def test_default_manager_includes_regional_variants(self):
        regional = self.page.create_translation("fr_FR", title="A propos", slug="a-propos")
        with translation.override("fr"):
            self.assertEqual(list(Page.objects.all()), [regional])
        with translation.override("fr-fr"):
            self.assertEqual(list(Page.objects.all()), [regional])
        with translation.override("en"):
            self.assertEqual(list(Page.objects.all()), [self.page])

    def test_empty_locale_is_rejected_on_save(self):
        with self.assertRaises(ValidationError):
            Page.objects.create(locale="", title="Draft", slug="draft")
        with self.assertRaises(ValidationError):
            self.page.create_translation("not a locale", title="Bad", slug="bad")
        self.assertEqual(Page.all_locales.count(), 1)

    def test_locale_field_validation(self):
        page = Page(locale="", title="Draft", slug="draft")
        with self.assertRaises(ValidationError) as ctx:
            page.full_clean()
        self.assertIn("locale", ctx.exception.message_dict)

        for locale in ["en", "fr_FR", "en-us", "zh_Hans"]:
            Page(locale=locale, title="Ok", slug=f"ok-{locale.lower()}").full_clean()


class ContentViewsTestCase(TestCase):
    """Detail pages render for every locale."""

    @classmethod
    def setUpTestData(cls):
        cls.page = Page.objects.create(locale="en", title="About", slug="about")
        cls.page.create_translation("fr_FR", title="A propos", slug="a-propos")
        cls.article = Article.objects.create(
            title_en="Hello", title_fr="Bonjour", slug="hello"
        )
        cls.author = Author.objects.create(name="Ada", slug="ada")

    def setUp(self):
        self.client = Client()

    def test_page_detail_in_default_locale(self):
        response = self.client.get("/pages/about/")
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "pages/page_detail.html")
        self.assertContains(response, 'href="/pages/a-propos/"')

    def test_page_detail_in_other_locale(self):
        """Translated pages are reachable whatever the active language."""
        response = self.client.get("/pages/a-propos/")
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "A propos")

    def test_unpublished_page_returns_404(self):
        Page.objects.create(locale="en", title="Draft", slug="draft", is_published=False)
        response = self.client.get("/pages/draft/")
        self.assertEqual(response.status_code, 404)

    def test_article_detail_per_language(self):
        response = self.client.get("/en/articles/hello/")
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Hello")

        response = self.client.get("/fr/articles/hello/")
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Bonjour")

    def test_author_detail(self):
        response = self.client.get("/authors/ada/")
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "pages/author_detail.html")


class SitemapSectionsTestCase(TestCase):
    """Sitemap sections list only published content."""

    def test_pages_section_skips_unpublished(self):
        Page.objects.create(locale="en", title="About", slug="about")
        Page.objects.create(locale="en", title="Draft", slug="draft", is_published=False)
        with locale_filter_disabled():
            items = list(site_sitemaps["pages"]().items())
        self.assertEqual([p.slug for p in items], ["about"])

    def test_articles_section(self):
        Article.objects.create(title_en="Hello", slug="hello")
        Article.objects.create(title_en="Draft", slug="draft", is_published=False)
        items = list(site_sitemaps["articles"]().items())
        self.assertEqual([a.slug for a in items], ["hello"])


class AdminTestCase(TestCase):
    """Editors see pages of every locale in the admin."""

    def setUp(self):
        self.user = User.objects.create_superuser(
            username="admin", email="admin@example.com", password="pass"
        )
        self.client.force_login(self.user)

    def test_page_changelist_lists_all_locales(self):
        page = Page.objects.create(locale="en", title="About", slug="about")
        page.create_translation("fr_FR", title="A propos", slug="a-propos")

        response = self.client.get("/admin/pages/page/")
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "About")
        self.assertContains(response, "A propos")

    def test_article_changelist(self):
        Article.objects.create(title_en="Hello", slug="hello")
        response = self.client.get("/admin/pages/article/")
        self.assertEqual(response.status_code, 200)


class SEOTestCase(TestCase):
    """robots.txt and health check are language-neutral."""

    def test_robots_txt_references_sitemap(self):
        response = self.client.get("/robots.txt")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "text/plain")
        content = response.content.decode()
        self.assertIn("Sitemap: http://testserver/sitemap.xml", content)
        self.assertIn("Disallow: /admin/", content)

    def test_health_check_returns_200(self):
        response = self.client.get("/healthz/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b"OK")
