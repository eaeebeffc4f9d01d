"""Django settings for the django-api project."""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

INSTALLED_APPS = [
    "purchases",
]

USE_TZ = True

PURCHASES = {
    "MAX_TICKETS_PER_PURCHASE": 25,
    "TICKET_PRICES": {"ADULT": 25, "CHILD": 15, "INFANT": 0},
    "PAYMENT_SERVICE": "purchases.gateways.local.LocalTicketPaymentService",
    "RESERVATION_SERVICE": "purchases.gateways.local.LocalSeatReservationService",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "purchases": {
            "handlers": ["console"],
            "level": os.environ.get("PURCHASES_LOG_LEVEL", "INFO"),
        },
    },
}
