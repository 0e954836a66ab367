from django.apps import AppConfig


class PagesConfig(AppConfig):
    """Site content listed in the multilingual sitemap."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "pages"
    verbose_name = "Pages"
