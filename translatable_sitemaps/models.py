import re
import uuid

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _

from .locales import current_locale, locale_filter_enabled

LOCALE_PATTERN = re.compile(r"^[A-Za-z]{2,3}([_-][A-Za-z0-9]{2,8})*$")


def validate_locale(value):
    """Locale codes are non-empty and look like 'en', 'fr_FR' or 'zh_Hans'."""
    if not value or not LOCALE_PATTERN.match(value):
        raise ValidationError(
            _("%(value)r is not a valid locale code."),
            code="invalid_locale",
            params={"value": value},
        )


class TranslatableQuerySet(models.QuerySet):
    """QuerySet helpers for records stored once per locale."""

    def in_locale(self, locale):
        return self.filter(locale=locale)

    def translations_of(self, obj):
        """All records sharing obj's translation group, obj excluded, in creation order."""
        return (
            self.filter(translation_group=obj.translation_group)
            .exclude(pk=obj.pk)
            .order_by("pk")
        )


class TranslatableManager(models.Manager):
    """
    Default manager for translatable models.

    While the locale filter is enabled only records in the current locale are
    returned. A record matches when its locale equals the active language's
    locale (to_locale: 'fr-fr' -> 'fr_FR') or, for a bare language such as
    'fr', when it is a regional variant of it ('fr_FR', 'fr_BE').
    Wrap queries in locale_filter_disabled() to see every locale:

        with locale_filter_disabled():
            Page.objects.count()  # all locales
    """

    def get_queryset(self):
        queryset = TranslatableQuerySet(self.model, using=self._db)
        if locale_filter_enabled():
            locale = current_locale()
            queryset = queryset.filter(
                Q(locale=locale) | Q(locale__startswith=f"{locale}_")
            )
        return queryset


class TranslatableModel(models.Model):
    """
    Abstract base for content stored as one record per locale.

    Records that translate each other share a translation_group.
    """

    locale = models.CharField(
        max_length=20,
        db_index=True,
        validators=[validate_locale],
        help_text=_("Locale code of this record, e.g. 'en' or 'fr_FR'"),
    )
    translation_group = models.UUIDField(
        default=uuid.uuid4,
        db_index=True,
        editable=False,
    )

    objects = TranslatableManager()
    all_locales = TranslatableQuerySet.as_manager()

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        # Sitemaps need a usable locale for every stored record
        validate_locale(self.locale)
        super().save(*args, **kwargs)

    def get_translations(self):
        """Other-locale records of this content, oldest first."""
        return list(type(self).all_locales.translations_of(self))

    def has_translation(self, locale):
        return type(self).all_locales.translations_of(self).filter(locale=locale).exists()

    def create_translation(self, locale, **fields):
        """Create and return a record for locale in this record's translation group."""
        return type(self).all_locales.create(
            locale=locale,
            translation_group=self.translation_group,
            **fields,
        )
