"""Serializers for directory entries."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Consumption, MeetingRoom, Unit


class UnitSerializer(serializers.ModelSerializer):
    class Meta:
        model = Unit
        fields = ["id", "name", "is_active", "created_at", "updated_at"]


class MeetingRoomSerializer(serializers.ModelSerializer):
    class Meta:
        model = MeetingRoom
        fields = ["id", "name", "capacity", "is_active", "created_at", "updated_at"]


class ConsumptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Consumption
        fields = ["id", "name", "is_active", "created_at", "updated_at"]


class UnitSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Unit
        fields = ["id", "name"]


class MeetingRoomSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = MeetingRoom
        fields = ["id", "name", "capacity"]


class ConsumptionSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Consumption
        fields = ["id", "name"]
