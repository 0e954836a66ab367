from django.apps import AppConfig


class TranslatableSitemapsConfig(AppConfig):
    """Multilingual (hreflang) annotations for Django sitemaps."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "translatable_sitemaps"
    verbose_name = "Translatable Sitemaps"
