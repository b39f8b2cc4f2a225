"""Read-only API views for directory entries."""

from __future__ import annotations

from rest_framework import generics  # type: ignore

from apps.core.responses import envelope

from .models import Consumption, MeetingRoom, Unit
from .serializers import ConsumptionSerializer, MeetingRoomSerializer, UnitSerializer


class ActiveEntryListView(generics.ListAPIView):
    """Lists active entries ordered by name, unpaginated."""

    pagination_class = None
    filter_backends: list = []
    message = "Records retrieved successfully"

    def get_queryset(self):  # type: ignore
        return self.queryset.active().order_by("name")

    def list(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return envelope(serializer.data, self.message)


class UnitListView(ActiveEntryListView):
    queryset = Unit.objects.all()
    serializer_class = UnitSerializer
    message = "Units retrieved successfully"


class MeetingRoomListView(ActiveEntryListView):
    queryset = MeetingRoom.objects.all()
    serializer_class = MeetingRoomSerializer
    message = "Meeting rooms retrieved successfully"


class ConsumptionListView(ActiveEntryListView):
    queryset = Consumption.objects.all()
    serializer_class = ConsumptionSerializer
    message = "Consumptions retrieved successfully"
