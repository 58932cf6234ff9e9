"""``runserver`` listening on the weather service port by default."""
from __future__ import annotations

from django.conf import settings
from django.core.management.commands.runserver import Command as BaseRunserverCommand


class Command(BaseRunserverCommand):
    default_port = str(settings.WEATHER_PORT)
