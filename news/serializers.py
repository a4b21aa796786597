"""
news/serializers.py

DRF serializers for the JSON shape of the news archive.
The entries are not models, so these are plain read-only Serializers.
The taxonomy root used for interpolated bodies comes in via context["root"].
"""
from rest_framework import serializers


class NewsEntrySerializer(serializers.Serializer):
    date = serializers.CharField(read_only=True)
    year = serializers.IntegerField(read_only=True)
    body = serializers.SerializerMethodField()

    def get_body(self, obj) -> str:
        return str(obj.render_body(self.context["root"]))


class YearGroupSerializer(serializers.Serializer):
    year = serializers.IntegerField(read_only=True)
    entries = serializers.SerializerMethodField()

    def get_entries(self, obj):
        return NewsEntrySerializer(obj.entries, many=True, context=self.context).data
