"""
Django settings for shiftly project.
"""

import sys
from pathlib import Path

from decouple import Csv, config  # pip install python-decouple

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# Check if we're running tests
TESTING = "test" in sys.argv or "pytest" in sys.modules

# SECURITY SETTINGS
SECRET_KEY = config("SECRET_KEY", default="" if not TESTING else "shiftly-test-key")
if not SECRET_KEY:
    raise ValueError("SECRET_KEY environment variable must be set")

DEBUG = config("DEBUG", default=False, cast=bool)

ALLOWED_HOSTS = config("ALLOWED_HOSTS", default="localhost,127.0.0.1", cast=Csv())

# Application definition
INSTALLED_APPS = [
    # Local apps
    "earnings",
]

# The earnings engine stores nothing; persistence belongs to the owning app.
DATABASES = {}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = config("TIME_ZONE", default="Asia/Jerusalem")
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


def _optional_hours(value):
    """Empty env value means no threshold"""
    return float(value) if str(value).strip() else None


# Shift earnings configuration
EARNINGS = {
    "DEFAULT_HOURLY_RATE": config("EARNINGS_DEFAULT_HOURLY_RATE", default="125"),
    "CURRENCY_CODE": config("EARNINGS_CURRENCY_CODE", default="ILS"),
    "SYMBOL_ON_RIGHT": config("EARNINGS_SYMBOL_ON_RIGHT", default=True, cast=bool),
    "LIVE_TICK_SECONDS": config("EARNINGS_LIVE_TICK_SECONDS", default=1.0, cast=float),
    "DAILY_OVERTIME_THRESHOLD_HOURS": config(
        "EARNINGS_DAILY_OVERTIME_THRESHOLD_HOURS", default="8.0", cast=_optional_hours
    ),
    "DAILY_OVERTIME_MULTIPLIER": config(
        "EARNINGS_DAILY_OVERTIME_MULTIPLIER", default=1.25, cast=float
    ),
    "WEEKLY_OVERTIME_THRESHOLD_HOURS": config(
        "EARNINGS_WEEKLY_OVERTIME_THRESHOLD_HOURS", default="", cast=_optional_hours
    ),
    "WEEKLY_OVERTIME_MULTIPLIER": config(
        "EARNINGS_WEEKLY_OVERTIME_MULTIPLIER", default=1.5, cast=float
    ),
    "PROGRESS_MODE": config("EARNINGS_PROGRESS_MODE", default="planned_end"),
    "TARGET_HOURS": config("EARNINGS_TARGET_HOURS", default=8.0, cast=float),
}

LOG_DIR = Path(config("LOG_DIR", default=str(BASE_DIR / "logs")))

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,

    "filters": {
        "pii_redactor": {"()": "shiftly.logging_filters.PIIRedactorFilter"},
    },

    "formatters": {
        "verbose": {"format": "{levelname} {asctime} {module} {process:d} {thread:d} {message}", "style": "{"},
        "simple":  {"format": "{levelname} {asctime} {message}", "style": "{"},
        "minimal": {"format": "{levelname} {message}", "style": "{"},
    },

    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "minimal",
            "level": "DEBUG" if DEBUG else "INFO",
            "filters": ["pii_redactor"],
        },
        "earnings_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": LOG_DIR / "earnings.log",
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 3,
            "formatter": "simple",
            "level": "INFO",
            "encoding": "utf-8",
            "delay": True,
            "filters": ["pii_redactor"],
        },
    },

    "loggers": {
        "django":   {"handlers": ["console"], "level": "INFO", "propagate": False},
        "earnings": {"handlers": ["console"] if DEBUG else ["earnings_file"], "level": "INFO", "propagate": False},
        "core":     {"handlers": ["console"], "level": "WARNING", "propagate": False},

        # root
        "": {"handlers": ["console"], "level": "WARNING"},
    },
}

if not TESTING:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
