# translatable_sitemaps/conf.py
"""
Settings accessors for translatable sitemaps.

Values are read from django.conf.settings on every call so that
override_settings() in tests and per-site settings modules take effect
without a restart.

Example settings:

    TRANSLATABLE_SITEMAP_GENERIC_LOCALES = {
        'en_US': 'en',
        'nl_NL': 'nl',
    }
    TRANSLATABLE_SITEMAP_ALLOWED_LOCALES = ['en', 'de', 'fr']
    TRANSLATABLE_SITEMAP_DEFAULT_LOCALE = 'en'
"""
import logging
from collections.abc import Mapping

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


def generic_locales() -> dict:
    """
    Return the locale -> generic locale mapping.

    A missing or empty setting means "no mapping".
    """
    value = getattr(settings, 'TRANSLATABLE_SITEMAP_GENERIC_LOCALES', None)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        logger.error(
            "TRANSLATABLE_SITEMAP_GENERIC_LOCALES must be a mapping, got %s",
            type(value).__name__,
        )
        raise ImproperlyConfigured(
            "TRANSLATABLE_SITEMAP_GENERIC_LOCALES must be a mapping of "
            "specific locale to generic locale, e.g. {'en_US': 'en'}."
        )
    return dict(value)


def default_locale() -> str:
    return getattr(settings, 'TRANSLATABLE_SITEMAP_DEFAULT_LOCALE', None) or settings.LANGUAGE_CODE


def allowed_locales() -> list:
    """Allowed locales in configured order. Defaults to the codes in LANGUAGES."""
    locales = getattr(settings, 'TRANSLATABLE_SITEMAP_ALLOWED_LOCALES', None)
    if not locales:
        locales = [code for code, name in settings.LANGUAGES]
    locales = list(locales)

    default = default_locale()
    if default not in locales:
        raise ImproperlyConfigured(
            f"Default locale {default!r} is not one of the allowed locales {locales!r}."
        )
    return locales


def translation_locales() -> list:
    """Allowed locales without the default one."""
    default = default_locale()
    return [locale for locale in allowed_locales() if locale != default]
