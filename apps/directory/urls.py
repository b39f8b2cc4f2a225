"""URL routing for directory listings."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import ConsumptionListView, MeetingRoomListView, UnitListView

urlpatterns = [
    path("units/", UnitListView.as_view(), name="unit-list"),
    path("rooms/", MeetingRoomListView.as_view(), name="meeting-room-list"),
    path("consumptions/", ConsumptionListView.as_view(), name="consumption-list"),
]
