from datetime import date

from django.conf import settings
from django.utils import timezone


def today():
    if settings.USE_TZ:
        return timezone.localdate()
    return date.today()


def today_string():
    return today().isoformat()
