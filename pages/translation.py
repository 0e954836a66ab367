"""
django-modeltranslation registration for site content.

Article stores every language in its own columns (title_en, title_fr, ...).
Page is translated differently: one record per locale (see TranslatableModel).
"""

from modeltranslation.translator import translator, TranslationOptions

from .models import Article


class ArticleTranslationOptions(TranslationOptions):
    """Translatable fields for articles."""

    fields = ('title', 'body')


translator.register(Article, ArticleTranslationOptions)
