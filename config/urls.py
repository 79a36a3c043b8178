"""URL routing for the Gazette notices site.

The notices page lives under /gazette-notices/; its JSON twin and the
OpenAPI schema live under /api/.
"""
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.views import SpectacularAPIView

from notices.views import NoticesApiView


urlpatterns = [
    path("", RedirectView.as_view(pattern_name="notices:info", permanent=False), name="index"),
    path("gazette-notices/", include("notices.urls")),
    path("api/v1/notices/", NoticesApiView.as_view(), name="notices-api"),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
]
