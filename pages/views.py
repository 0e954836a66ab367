"""
Detail views for site content.
"""

from django.shortcuts import get_object_or_404, render
from django.views.decorators.http import require_GET

from .models import Article, Author, Page


@require_GET
def page_detail(request, slug):
    """A page in whatever locale its slug belongs to."""
    page = get_object_or_404(Page.all_locales, slug=slug, is_published=True)
    context = {
        "page_title": page.title,
        "object": page,
        "translations": page.get_translations(),
    }
    return render(request, "pages/page_detail.html", context)


@require_GET
def article_detail(request, slug):
    """An article in the language of the URL prefix."""
    article = get_object_or_404(Article, slug=slug, is_published=True)
    context = {
        "page_title": article.title,
        "object": article,
    }
    return render(request, "pages/article_detail.html", context)


@require_GET
def author_detail(request, slug):
    author = get_object_or_404(Author, slug=slug)
    return render(request, "pages/author_detail.html", {"object": author})
