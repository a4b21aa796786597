"""
wikipedia/serializers.py

DRF serializers for the public JSON shape of the Wikipedia links.
"""
from rest_framework import serializers
from .models import WikipediaLink


class WikipediaLinkSerializer(serializers.ModelSerializer):
    page_id = serializers.IntegerField(source="page.page_id", read_only=True)
    title = serializers.CharField(source="page.title", read_only=True)

    class Meta:
        model = WikipediaLink
        fields = ["page_id", "title", "link"]
        read_only_fields = fields
