from datetime import datetime, time, timedelta

import pytest
from django.utils import timezone

from apps.bookings.application.command_handlers import DeleteBookingCommand, DeleteBookingHandler
from apps.bookings.exceptions import BookingAlreadyStarted, BookingNotFound
from apps.bookings.models import Booking, BookingConsumption
from apps.bookings.services import DjangoBookingStore
from apps.directory.models import Consumption, MeetingRoom, Unit


@pytest.fixture
def room(db):
    return MeetingRoom.objects.create(name="Conference Room B", capacity=6)


@pytest.fixture
def unit(db):
    return Unit.objects.create(name="Finance Department")


@pytest.fixture
def meeting_date():
    return timezone.localdate() + timedelta(days=3)


@pytest.fixture
def booking(unit, room, meeting_date):
    return Booking.objects.create(
        unit=unit,
        meeting_room=room,
        meeting_date=meeting_date,
        start_time=time(10, 0),
        end_time=time(11, 0),
        total_participants=3,
    )


@pytest.mark.django_db
@pytest.mark.parametrize(
    "start,end,overlaps",
    [
        (time(9, 0), time(10, 0), False),
        (time(11, 0), time(12, 0), False),
        (time(9, 30), time(10, 1), True),
        (time(10, 59), time(12, 0), True),
        (time(10, 15), time(10, 45), True),
    ],
)
def test_find_overlapping_booking_uses_half_open_ranges(booking, room, meeting_date, start, end, overlaps):
    found = DjangoBookingStore().find_overlapping_booking(room.id, meeting_date, start, end)

    assert (found == booking) is overlaps


@pytest.mark.django_db
def test_find_overlapping_booking_honours_exclusion(booking, room, meeting_date):
    store = DjangoBookingStore()

    assert store.find_overlapping_booking(
        room.id, meeting_date, time(10, 0), time(11, 0), exclude_booking_id=booking.pk
    ) is None


@pytest.mark.django_db
def test_find_room_by_id_returns_none_for_unknown_room():
    assert DjangoBookingStore().find_room_by_id(12345) is None


@pytest.mark.django_db
def test_get_booking_raises_when_missing():
    with pytest.raises(BookingNotFound):
        DjangoBookingStore().get_booking(12345)


@pytest.mark.django_db
def test_create_booking_links_unique_consumptions(unit, room, meeting_date):
    coffee = Consumption.objects.create(name="Coffee")
    water = Consumption.objects.create(name="Water")

    booking = DjangoBookingStore().create_booking(
        {
            "unit_id": unit.id,
            "meeting_room_id": room.id,
            "meeting_date": meeting_date,
            "start_time": time(13, 0),
            "end_time": time(14, 0),
            "total_participants": 2,
        },
        [coffee.id, water.id, coffee.id],
    )

    assert set(booking.consumptions.values_list("name", flat=True)) == {"Coffee", "Water"}


@pytest.mark.django_db
def test_delete_booking_refuses_started_booking(booking):
    started = timezone.make_aware(
        datetime.combine(booking.meeting_date, time(10, 0)) + timedelta(minutes=1),
        timezone.get_default_timezone(),
    )

    with pytest.raises(BookingAlreadyStarted):
        DjangoBookingStore().delete_booking(booking, now=started)

    assert Booking.objects.filter(pk=booking.pk).exists()


@pytest.mark.django_db
def test_delete_handler_removes_booking_and_links(booking):
    BookingConsumption.objects.create(booking=booking, consumption=Consumption.objects.create(name="Tea"))

    DeleteBookingHandler().handle(DeleteBookingCommand(booking_id=booking.pk))

    assert not Booking.objects.exists()
    assert not BookingConsumption.objects.exists()
    assert Consumption.objects.filter(name="Tea").exists()
