"""
Booking Command Handlers

These are the use cases for the booking domain.
They orchestrate validation and persistence within transactions.

Commands:
- CreateBookingCommand: Create a new booking
- UpdateBookingCommand: Change an existing booking
- DeleteBookingCommand: Delete a booking that has not started yet
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional

import structlog
from django.utils import timezone

from shared.application.uow import DjangoUnitOfWork
from shared.domain.value_objects import TimeOfDay
from apps.bookings.domain.validation import BookingCandidate, BookingValidator
from apps.bookings.exceptions import BookingValidationFailed
from apps.bookings.models import Booking
from apps.bookings.services import DjangoBookingStore

logger = structlog.get_logger(__name__)


# ===== Commands =====

@dataclass
class CreateBookingCommand:
    """
    Command to create a new booking

    Times are "HH:MM" strings; their format is checked by validation.
    """
    unit_id: int
    meeting_room_id: int
    meeting_date: date
    start_time: str
    end_time: str
    total_participants: int
    total_consumption: int = 0
    notes: Optional[str] = None
    consumption_ids: List[int] = field(default_factory=list)


@dataclass
class UpdateBookingCommand:
    """
    Command to update a booking

    changes holds only the fields the client supplied, keyed like
    CreateBookingCommand. consumption_ids=None leaves the links untouched;
    a list (even empty) replaces them.
    """
    booking_id: int
    changes: Dict[str, Any] = field(default_factory=dict)
    consumption_ids: Optional[List[int]] = None


@dataclass
class DeleteBookingCommand:
    """Command to delete a booking"""
    booking_id: int


# ===== Command Handlers =====

class _BookingHandler:
    def __init__(self, store=None, validator: Optional[BookingValidator] = None):
        self.store = store or DjangoBookingStore()
        self.validator = validator or BookingValidator(self.store)

    def _validate(self, candidate: BookingCandidate) -> None:
        report = self.validator.validate(candidate)
        if not report.is_valid:
            logger.info(
                "booking.validation_failed",
                room_id=candidate.room_id,
                meeting_date=str(candidate.meeting_date),
                start_time=candidate.start_time,
                end_time=candidate.end_time,
                codes=report.codes,
            )
            raise BookingValidationFailed(report)


class CreateBookingHandler(_BookingHandler):
    """
    Handler for CreateBooking command

    Strategy:
    1. Start database transaction (atomic)
    2. Lock the meeting room row (SELECT FOR UPDATE where supported),
       so two requests for one room cannot both pass the overlap check
    3. Run all booking checks
    4. Insert the booking and its consumption links
    5. Commit; any failure rolls back both writes
    """

    def handle(self, command: CreateBookingCommand) -> Booking:
        with DjangoUnitOfWork() as uow:
            self.store.lock_room(command.meeting_room_id)

            self._validate(BookingCandidate(
                room_id=command.meeting_room_id,
                meeting_date=command.meeting_date,
                start_time=command.start_time,
                end_time=command.end_time,
                participants=command.total_participants,
            ))

            booking = self.store.create_booking(
                {
                    'unit_id': command.unit_id,
                    'meeting_room_id': command.meeting_room_id,
                    'meeting_date': command.meeting_date,
                    'start_time': TimeOfDay.parse(command.start_time).to_time(),
                    'end_time': TimeOfDay.parse(command.end_time).to_time(),
                    'total_participants': command.total_participants,
                    'total_consumption': command.total_consumption or 0,
                    'notes': command.notes,
                },
                command.consumption_ids,
            )

            uow.on_commit(lambda: logger.info(
                "booking.created",
                booking_id=booking.pk,
                room_id=booking.meeting_room_id,
                meeting_date=str(booking.meeting_date),
                time_range=str(booking.time_range),
            ))

        return booking


class UpdateBookingHandler(_BookingHandler):
    """
    Handler for UpdateBooking command

    Supplied values are merged over the stored ones and the merged booking
    is validated again. The booking itself is excluded from the overlap
    check, so it may keep (or shrink within) its own slot.
    """

    def handle(self, command: UpdateBookingCommand) -> Booking:
        changes = command.changes

        with DjangoUnitOfWork() as uow:
            booking = self.store.get_booking(command.booking_id, lock=True)

            room_id = _pick(changes, 'meeting_room_id', booking.meeting_room_id)
            meeting_date = _pick(changes, 'meeting_date', booking.meeting_date)
            start_time = _pick(changes, 'start_time', str(TimeOfDay.from_time(booking.start_time)))
            end_time = _pick(changes, 'end_time', str(TimeOfDay.from_time(booking.end_time)))
            participants = _pick(changes, 'total_participants', booking.total_participants)

            self.store.lock_room(room_id)

            self._validate(BookingCandidate(
                room_id=room_id,
                meeting_date=meeting_date,
                start_time=start_time,
                end_time=end_time,
                participants=participants,
                exclude_booking_id=booking.pk,
            ))

            fields = {
                'unit_id': _pick(changes, 'unit_id', booking.unit_id),
                'meeting_room_id': room_id,
                'meeting_date': meeting_date,
                'start_time': TimeOfDay.parse(start_time).to_time(),
                'end_time': TimeOfDay.parse(end_time).to_time(),
                'total_participants': participants,
                'total_consumption': _pick(changes, 'total_consumption', booking.total_consumption),
                # An explicit null clears the notes.
                'notes': changes['notes'] if 'notes' in changes else booking.notes,
            }

            booking = self.store.update_booking(booking, fields, command.consumption_ids)

            uow.on_commit(lambda: logger.info(
                "booking.updated",
                booking_id=booking.pk,
                room_id=booking.meeting_room_id,
                meeting_date=str(booking.meeting_date),
                time_range=str(booking.time_range),
                consumptions_replaced=command.consumption_ids is not None,
            ))

        return booking


class DeleteBookingHandler:
    """
    Handler for DeleteBooking command

    Bookings whose date + start time is already in the past cannot be
    deleted. Consumption links are removed before the booking row, in the
    same transaction.
    """

    def __init__(self, store=None, now: Optional[Callable[[], datetime]] = None):
        self.store = store or DjangoBookingStore()
        self._now = now or timezone.now

    def handle(self, command: DeleteBookingCommand) -> None:
        with DjangoUnitOfWork() as uow:
            booking = self.store.get_booking(command.booking_id, lock=True)
            links_deleted = self.store.delete_booking(booking, now=self._now())

            uow.on_commit(lambda: logger.info(
                "booking.deleted",
                booking_id=command.booking_id,
                consumption_links=links_deleted,
            ))


def _pick(changes: Dict[str, Any], name: str, current: Any) -> Any:
    """Supplied value, or the stored one when absent or null"""
    value = changes.get(name)
    return current if value is None else value
