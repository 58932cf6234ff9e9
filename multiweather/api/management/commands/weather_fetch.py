"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from multiweather.api.views import _serialize_result, default_aggregator, lookup
from multiweather.core.providers.base import ProviderError


class Command(BaseCommand):
    help = "Fetch the averaged current temperature for a city"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("city", type=str, help="City name, passed to every provider as is")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = options["city"]
        try:
            result = lookup(city, default_aggregator())
        except ProviderError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(json.dumps(_serialize_result(result), ensure_ascii=False))
