from __future__ import annotations

import os
from pathlib import Path

import django


TESTS_DIR = Path(__file__).resolve().parent / "tests"

os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "multiweather.settings")
os.environ.setdefault("WEATHER_SECRETS_FILE", str(TESTS_DIR / "fixtures" / "secrets.toml"))
os.environ.setdefault("OPENWEATHERMAP_URL", "http://owm.test/data/2.5/weather")
os.environ.setdefault("WUNDERGROUND_URL", "http://wu.test/api")

django.setup()
