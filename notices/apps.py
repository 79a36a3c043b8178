from django.apps import AppConfig


class NoticesConfig(AppConfig):
    """App configuration for the Gazette notices page."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "notices"
    verbose_name = "Gazette Notices"
