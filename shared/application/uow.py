"""
Unit of Work Pattern

Wraps a multi-step write (a booking row plus its consumption links) in a
single database transaction: either every step is committed or none is.
"""

from abc import ABC, abstractmethod
from typing import Callable, List
import logging

from django.db import transaction

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        """Commit the transaction"""
        pass

    @abstractmethod
    def rollback(self):
        """Rollback the transaction"""
        pass


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Manages a Django database transaction. Callbacks registered with
    on_commit() run only after the outer transaction commits and are
    dropped on rollback.

    Usage:
        with DjangoUnitOfWork() as uow:
            store.lock_room(room_id)
            report = validator.validate(candidate)
            booking = store.create_booking(fields, consumption_ids)
            uow.on_commit(lambda: logger.info("booking.created", booking_id=booking.pk))
            # Transaction commits here
    """

    def __init__(self, using: str | None = None):
        self.using = using
        self._callbacks: List[Callable[[], None]] = []
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic(using=self.using)
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)

    def on_commit(self, callback: Callable[[], None]):
        """Run callback once the surrounding transaction has committed"""
        self._callbacks.append(callback)

    def commit(self):
        """
        Schedule post-commit callbacks

        The actual COMMIT is issued by transaction.atomic() on exit;
        callbacks go through transaction.on_commit() so they never fire
        for a transaction that is rolled back later.
        """
        logger.debug(f"Committing transaction with {len(self._callbacks)} callbacks")

        callbacks = self._callbacks.copy()
        self._callbacks.clear()

        for callback in callbacks:
            transaction.on_commit(callback, using=self.using)

    def rollback(self):
        """Rollback changes and discard callbacks"""
        logger.debug(f"Rolling back transaction, discarding {len(self._callbacks)} callbacks")
        self._callbacks.clear()
