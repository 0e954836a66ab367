# translatable_sitemaps/capabilities.py
"""
Translation capabilities of sitemap entries.

Two ways of storing translations are recognised:

- full translation: one record per locale (TranslatableModel subclasses),
  linked through a shared translation group
- field translation: one record holding per-locale column values
  (models registered with django-modeltranslation, e.g. title_en, title_fr)

Anything else is untranslatable and passes through the sitemap untouched.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from modeltranslation.translator import NotRegistered, translator
from modeltranslation.utils import build_localized_fieldname

from . import conf
from .models import TranslatableModel


class EntryKind(Enum):
    UNTRANSLATABLE = "untranslatable"
    FULL_TRANSLATION = "full-translation"
    FIELD_TRANSLATION = "field-translation"


@dataclass(frozen=True)
class LocalizedValue:
    """A field value and the locale it was read from."""

    value: Any
    source: Optional[str]


def is_field_translated(model) -> bool:
    try:
        translator.get_options_for_model(model)
    except NotRegistered:
        return False
    return True


def entry_kind(entry) -> EntryKind:
    if isinstance(entry, TranslatableModel):
        return EntryKind.FULL_TRANSLATION
    if is_field_translated(type(entry)):
        return EntryKind.FIELD_TRANSLATION
    return EntryKind.UNTRANSLATABLE


def has_capability(entry, name: str) -> bool:
    """has_capability(page, 'full-translation') -> True"""
    return entry_kind(entry).value == name


def get_localizable_fields(model) -> list:
    """Names of the fields registered for translation on model, in registration order."""
    try:
        options = translator.get_options_for_model(model)
    except NotRegistered:
        return []
    return list(options.fields)


def get_localized_value(entry, field: str, locale: str, strict: bool = True) -> LocalizedValue:
    """
    Read field for locale straight from its per-locale column.

    In strict mode an empty value is returned as is, so a non-empty result
    means a real translation exists. Otherwise an empty value falls back to
    the default locale, which is then reported as the source.
    """
    value = getattr(entry, build_localized_fieldname(field, locale), None)
    if value or strict:
        return LocalizedValue(value, locale if value else None)

    default = conf.default_locale()
    fallback = getattr(entry, build_localized_fieldname(field, default), None)
    return LocalizedValue(fallback, default if fallback else None)
