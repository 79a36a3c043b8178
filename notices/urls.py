from django.urls import path

from .views import notices_info

app_name = "notices"

urlpatterns = [
    path("info/", notices_info, name="info"),
]
