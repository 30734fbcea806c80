import logging
from pathlib import Path

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger("radio")


class RadioConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "radio"
    verbose_name = "Radio Calico"

    def ready(self):
        covers = Path(settings.RADIO_COVERS_DIR)
        if not covers.exists():
            covers.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created album art directory {covers}")
