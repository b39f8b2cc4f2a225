"""Seed units, meeting rooms and consumption items."""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.directory.models import Consumption, MeetingRoom, Unit

UNITS = [
    "IT Department",
    "HR Department",
    "Finance Department",
    "Marketing Department",
]

MEETING_ROOMS = [
    ("Conference Room A", 10),
    ("Conference Room B", 6),
    ("Small Meeting Room", 4),
    ("Board Room", 20),
]

CONSUMPTIONS = [
    "Coffee",
    "Tea",
    "Snacks",
    "Lunch Box",
    "Water",
]


class Command(BaseCommand):
    help = "Creates the default units, meeting rooms and consumption items (idempotent)"

    @transaction.atomic
    def handle(self, *args, **options):
        created = 0

        for name in UNITS:
            _, was_created = Unit.objects.get_or_create(name=name)
            created += was_created

        for name, capacity in MEETING_ROOMS:
            _, was_created = MeetingRoom.objects.get_or_create(
                name=name,
                defaults={"capacity": capacity},
            )
            created += was_created

        for name in CONSUMPTIONS:
            _, was_created = Consumption.objects.get_or_create(name=name)
            created += was_created

        self.stdout.write(self.style.SUCCESS(f"Seed data ready, {created} new entries created"))
