# config/settings/local.py
from .base import *  # noqa
from .base import BASE_DIR, os

DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"

# Postgres only when explicitly configured; SQLite keeps a fresh checkout runnable.
if not os.getenv("DB_NAME"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }
