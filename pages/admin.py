from django.contrib import admin
from modeltranslation.admin import TranslationAdmin

from .models import Article, Author, Page


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ("title", "locale", "slug", "is_published", "updated_at")
    list_filter = ("locale", "is_published")
    search_fields = ("title", "slug")
    readonly_fields = ("translation_group",)

    def get_queryset(self, request):
        # Editors manage every locale, not only the active one
        return Page.all_locales.all()


@admin.register(Article)
class ArticleAdmin(TranslationAdmin):
    """Uses django-modeltranslation's tabbed interface for EN/DE/FR fields."""

    list_display = ("title", "slug", "is_published", "updated_at")
    search_fields = ("title", "slug")


@admin.register(Author)
class AuthorAdmin(admin.ModelAdmin):
    list_display = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}
