from django.apps import AppConfig
from django.conf import settings


class CareConfig(AppConfig):
    name = 'care'
    verbose_name = 'Clinic'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        from care.logging import configure_logging

        configure_logging(
            json_output=getattr(settings, 'LOG_JSON', False),
            level=getattr(settings, 'LOG_LEVEL', 'INFO'),
        )
