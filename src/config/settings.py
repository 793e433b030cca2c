"""Django settings for the trip planner project."""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
PROJECT_ROOT = BASE_DIR.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "change-me-in-production")
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = [host for host in os.getenv("DJANGO_ALLOWED_HOSTS", "").split(",") if host]

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "trip_planner",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"

# Everything lives in the page session; nothing is persisted.
DATABASES = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "trip_planner": {
            "handlers": ["console"],
            "level": os.getenv("TRIP_PLANNER_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}

TRIP_ORIGIN_LATITUDE = float(os.getenv("TRIP_ORIGIN_LATITUDE", "19.381014715828552"))
TRIP_ORIGIN_LONGITUDE = float(os.getenv("TRIP_ORIGIN_LONGITUDE", "-99.49333787546325"))

MAP_ZOOM = int(os.getenv("MAP_ZOOM", "6"))
MAP_TILE_URL = os.getenv("MAP_TILE_URL", "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png")
MAP_TILE_ATTRIBUTION = os.getenv(
    "MAP_TILE_ATTRIBUTION",
    '&copy; <a href="https://www.openstreetmap.org/">OpenStreetMap</a>',
)

DIRECTIONS_URL = os.getenv(
    "DIRECTIONS_URL", "https://api.openrouteservice.org/v2/directions/driving-car/geojson"
)
DIRECTIONS_API_KEY = os.getenv("DIRECTIONS_API_KEY", "")
DIRECTIONS_TIMEOUT_SECONDS = float(os.getenv("DIRECTIONS_TIMEOUT_SECONDS", "5"))

REVERSE_GEOCODING_URL = os.getenv(
    "REVERSE_GEOCODING_URL", "https://nominatim.openstreetmap.org/reverse"
)
GEOCODING_USER_AGENT = os.getenv("GEOCODING_USER_AGENT", "diesel-trip-planner/1.0")
GEOCODING_TIMEOUT_SECONDS = float(os.getenv("GEOCODING_TIMEOUT_SECONDS", "5"))

CURRENCY_CODE = os.getenv("CURRENCY_CODE", "MXN")
