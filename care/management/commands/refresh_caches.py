from django.conf import settings
from django.core.management.base import BaseCommand
from django.utils import timezone

from care.services.broadcast import notify_dashboard_refresh
from care.services.schedule import (
    AVAILABLE_TODAY_LIMIT,
    available_cache_key,
    available_doctors,
    forget_available_doctors,
    weekday_for,
)


class Command(BaseCommand):
    help = "Warm the available-doctor caches; broadcast a dashboard refresh event."

    def handle(self, *args, **options):
        now = timezone.now()
        day = weekday_for(now).value
        forget_available_doctors()

        variants = [
            (getattr(settings, 'DASHBOARD_DOCTOR_LIMIT', 5), False),
            (getattr(settings, 'PATIENT_DASHBOARD_DOCTOR_LIMIT', 4), False),
            (AVAILABLE_TODAY_LIMIT, True),
        ]
        keys_refreshed = []
        for limit, only_available in variants:
            available_doctors(now, limit, only_available=only_available)
            keys_refreshed.append(available_cache_key(day, limit, only_available))

        sent = notify_dashboard_refresh('caches_refreshed', keys_refreshed)
        self.stdout.write(self.style.SUCCESS(
            f"Refreshed {len(keys_refreshed)} keys at {now}" + ("" if sent else " (no channel layer)")
        ))
