# translatable_sitemaps/locales.py
"""
Locale helpers for multilingual sitemaps.

- get_google_locale(): normalizes a locale code for hreflang annotations
- the locale filter: a per-context switch that translatable managers consult
  to decide whether to hide records outside the current locale

Google accepts both generic ('en') and specific ('en-gb') hreflang values and
expects them in lowercase. Locales listed in TRANSLATABLE_SITEMAP_GENERIC_LOCALES
are collapsed to their language part:

    get_google_locale('en_US')  # 'en' when {'en_US': 'en'} is configured
    get_google_locale('NL_nl')  # 'nl_nl' when unmapped
"""
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Mapping, Optional

from django.utils.translation import get_language, to_locale

from . import conf

_locale_filter_enabled: ContextVar[bool] = ContextVar("locale_filter_enabled", default=True)


def get_google_locale(locale: str, generic_locales: Optional[Mapping] = None) -> str:
    """
    Return the hreflang value for a locale.

    The locale must be a non-empty string. When it is a key of the generic
    locale mapping, only its first two characters (the language) are kept.
    The result is always lower-cased.
    """
    if not locale:
        raise ValueError("A non-empty locale is required to build a Google locale")

    if generic_locales is None:
        generic_locales = conf.generic_locales()

    if locale in generic_locales:
        locale = locale[:2]
    return locale.lower()


def locale_filter_enabled() -> bool:
    return _locale_filter_enabled.get()


def set_locale_filter_enabled(enabled: bool) -> Token:
    """Switch the locale filter and return a token for reset_locale_filter()."""
    return _locale_filter_enabled.set(bool(enabled))


def reset_locale_filter(token: Token) -> None:
    _locale_filter_enabled.reset(token)


@contextmanager
def locale_filter_disabled():
    """
    Make records of every locale visible inside the block.

    Usage:
        with locale_filter_disabled():
            pages = list(Page.objects.all())  # all locales
    """
    token = set_locale_filter_enabled(False)
    try:
        yield
    finally:
        reset_locale_filter(token)


def current_locale() -> str:
    """Locale of the active language ('en-us' -> 'en_US'), or the default locale."""
    language = get_language()
    if not language:
        return conf.default_locale()
    return to_locale(language)
