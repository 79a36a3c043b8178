"""Notices page (HTML) and its JSON twin."""
from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.urls import reverse
from django.utils.decorators import method_decorator
from django.views.decorators.cache import never_cache
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from .client import PAGE_PARAM, get_notices_client
from .handler import NoticesPage, build_notices_page
from .serializers import ErrorSerializer, NoticesPageSerializer


def _load_page(raw_page) -> NoticesPage:
    client = get_notices_client()
    try:
        return build_notices_page(raw_page, client, reverse("notices:info"))
    finally:
        client.close()


@never_cache
def notices_info(request: HttpRequest) -> HttpResponse:
    """Render one page of the Gazette notices feed.

    Every hit fetches live data; the response is marked non-cacheable.
    Upstream failures render an inline error block instead of the table.
    """
    page = _load_page(request.GET.get(PAGE_PARAM))
    return render(request, "notices/info.html", {"notices": page})


@method_decorator(never_cache, name="dispatch")
class NoticesApiView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Notices"],
        description="One page of the Gazette notices feed as table rows plus pagination controls.",
        parameters=[
            OpenApiParameter(
                PAGE_PARAM,
                OpenApiTypes.INT,
                OpenApiParameter.QUERY,
                description="Page to fetch; values below 1 or non-numeric read as 1.",
            )
        ],
        responses={200: NoticesPageSerializer, 502: ErrorSerializer},
    )
    def get(self, request: Request) -> Response:
        page = _load_page(request.query_params.get(PAGE_PARAM))
        if not page.ok:
            return Response(page.as_dict(), status=status.HTTP_502_BAD_GATEWAY)
        return Response(page.as_dict())
