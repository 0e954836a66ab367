"""
Pytest configuration and fixtures for the translatable sitemaps project.
"""
import os
import pytest


def pytest_configure(config):
    """
    Hook called early in pytest startup to configure Django settings.
    This runs before pytest-django sets up Django.
    """
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'sitemapproject.settings')


@pytest.fixture
def annotator():
    """Annotator with a fixed locale setup, independent of project settings."""
    from translatable_sitemaps.annotator import SitemapLocaleAnnotator

    return SitemapLocaleAnnotator(
        base_url='http://testserver',
        generic_locales={'fr_FR': 'fr'},
        allowed_locales=['en', 'de', 'fr'],
        default_locale='en',
    )


@pytest.fixture
def translated_page(db):
    """An English page with fr_FR and de_DE translations, in that order."""
    from pages.models import Page

    page = Page.objects.create(locale='en', title='About', slug='about')
    page.create_translation('fr_FR', title='A propos', slug='a-propos')
    page.create_translation('de_DE', title='Uber uns', slug='uber-uns')
    return page


@pytest.fixture
def author(db):
    from pages.models import Author

    return Author.objects.create(name='Ada Lovelace', slug='ada-lovelace')
