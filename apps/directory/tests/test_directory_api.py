"""Tests for directory listings and the seed command."""

from __future__ import annotations

from django.core.management import call_command
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.directory.models import Consumption, MeetingRoom, Unit


class DirectoryAPITests(APITestCase):
    def test_units_are_active_and_sorted(self) -> None:
        Unit.objects.create(name="Marketing Department")
        Unit.objects.create(name="Finance Department")
        Unit.objects.create(name="Archived Department", is_active=False)

        response = self.client.get(reverse("unit-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["success"])
        self.assertEqual(
            [unit["name"] for unit in response.data["data"]],
            ["Finance Department", "Marketing Department"],
        )

    def test_rooms_include_capacity(self) -> None:
        MeetingRoom.objects.create(name="Board Room", capacity=20)
        MeetingRoom.objects.create(name="Closed Room", capacity=8, is_active=False)

        response = self.client.get(reverse("meeting-room-list"))

        self.assertEqual(len(response.data["data"]), 1)
        self.assertEqual(response.data["data"][0]["capacity"], 20)
        self.assertEqual(response.data["message"], "Meeting rooms retrieved successfully")

    def test_consumptions(self) -> None:
        Consumption.objects.create(name="Water")
        Consumption.objects.create(name="Coffee")

        response = self.client.get(reverse("consumption-list"))

        self.assertEqual([item["name"] for item in response.data["data"]], ["Coffee", "Water"])


class SeedDirectoryCommandTests(APITestCase):
    def test_seed_is_idempotent(self) -> None:
        call_command("seed_directory", verbosity=0)
        call_command("seed_directory", verbosity=0)

        self.assertEqual(Unit.objects.count(), 4)
        self.assertEqual(MeetingRoom.objects.count(), 4)
        self.assertEqual(Consumption.objects.count(), 5)
        self.assertEqual(MeetingRoom.objects.get(name="Board Room").capacity, 20)
