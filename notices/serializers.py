"""Response shapes for the notices JSON API (used for schema generation)."""
from __future__ import annotations

from rest_framework import serializers


class NoticeRowSerializer(serializers.Serializer):
    id = serializers.CharField()
    title = serializers.CharField(allow_blank=True)
    status = serializers.CharField(allow_blank=True)


class TableSerializer(serializers.Serializer):
    headers = serializers.ListField(child=serializers.CharField())
    rows = NoticeRowSerializer(many=True)
    empty_message = serializers.CharField()


class PageLinkSerializer(serializers.Serializer):
    label = serializers.CharField()
    page = serializers.IntegerField(min_value=1)
    url = serializers.CharField()


class PaginationSerializer(serializers.Serializer):
    current_page = serializers.IntegerField(min_value=1)
    total_pages = serializers.IntegerField(min_value=1)
    total_results = serializers.IntegerField()
    items_per_page = serializers.IntegerField()
    current = serializers.CharField()
    prev = PageLinkSerializer(allow_null=True)
    next = PageLinkSerializer(allow_null=True)


class NoticesPageSerializer(serializers.Serializer):
    table = TableSerializer()
    pagination = PaginationSerializer()


class ErrorSerializer(serializers.Serializer):
    detail = serializers.CharField()
