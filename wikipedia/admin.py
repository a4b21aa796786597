"""
wikipedia/admin.py

Read-mostly admin for checking an import (look up a title, see its links).
"""
from django.contrib import admin
from .models import WikipediaLink, WikipediaPage


class WikipediaLinkInline(admin.TabularInline):
    model = WikipediaLink
    extra = 0


@admin.register(WikipediaPage)
class WikipediaPageAdmin(admin.ModelAdmin):
    list_display = ("page_id", "title", "link_count")
    search_fields = ("title",)
    ordering = ("page_id",)
    inlines = [WikipediaLinkInline]

    def link_count(self, obj):
        return obj.links.count()


@admin.register(WikipediaLink)
class WikipediaLinkAdmin(admin.ModelAdmin):
    list_display = ("page", "link")
    search_fields = ("link", "page__title")
    list_select_related = ("page",)
