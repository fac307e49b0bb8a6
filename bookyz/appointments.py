# bookyz/appointments.py

import logging
from datetime import datetime, date, time
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from .config import APPOINTMENTS_KEY
from .data import HEBREW_WEEKDAYS
from .errors import NotFound
from .schemas import Appointment, AppointmentStatus, AppointmentSummary
from .storage import KeyValueStore

log = logging.getLogger(__name__)

_appointment_list = TypeAdapter(List[Appointment])


def starts_at(appt: Appointment) -> datetime:
    return datetime.combine(appt.date, time.fromisoformat(appt.time))


def is_active(appt: Appointment, now: datetime) -> bool:
    return appt.status == AppointmentStatus.confirmed and starts_at(appt) >= now


def display_status(appt: Appointment, now: datetime) -> str:
    if appt.status == AppointmentStatus.confirmed:
        return "מאושר" if starts_at(appt) >= now else "הסתיים"
    if appt.status == AppointmentStatus.completed:
        return "הושלם"
    return "בוטל"


def format_date(d: date) -> str:
    # dd/MM/yy, weekday
    return f"{d.strftime('%d/%m/%y')}, יום {HEBREW_WEEKDAYS[d.weekday()]}"


class AppointmentStore:
    """Insertion-ordered appointments, persisted as one JSON list in local storage."""

    def __init__(self, storage: Optional[KeyValueStore] = None, key: str = APPOINTMENTS_KEY):
        self.storage = storage
        self.key = key
        self._items: List[Appointment] = self._load()

    def _load(self) -> List[Appointment]:
        if self.storage is None:
            return []
        raw = self.storage.get(self.key)
        if raw is None:
            return []
        try:
            return _appointment_list.validate_json(raw)
        except ValidationError as exc:
            log.warning("Stored appointments could not be decoded, starting empty: %s", exc)
            return []

    def _save(self) -> None:
        if self.storage is None:
            return
        self.storage.set(self.key, _appointment_list.dump_json(self._items).decode())

    def add(self, appt: Appointment) -> Appointment:
        if any(a.id == appt.id for a in self._items):
            raise ValueError(f"Appointment {appt.id} already exists")
        self._items.append(appt)
        self._save()
        log.info("Appointment %s added (%s, %s %s)", appt.id, appt.staff_name, appt.date, appt.time)
        return appt

    def all(self) -> List[Appointment]:
        return list(self._items)

    def get(self, appt_id: str) -> Appointment:
        for appt in self._items:
            if appt.id == appt_id:
                return appt
        raise NotFound("Appointment", appt_id)

    def update_status(self, appt_id: str, status: AppointmentStatus) -> Appointment:
        appt = self.get(appt_id)
        appt.status = status
        self._save()
        log.info("Appointment %s status -> %s", appt_id, status.value)
        return appt

    def remove(self, appt_id: str) -> Appointment:
        appt = self.get(appt_id)
        self._items = [a for a in self._items if a.id != appt_id]
        self._save()
        log.info("Appointment %s removed", appt_id)
        return appt

    def active_count(self, now: datetime) -> int:
        return sum(1 for a in self._items if is_active(a, now))

    def completed_count(self) -> int:
        return sum(1 for a in self._items if a.status == AppointmentStatus.completed)

    def cancelled_count(self) -> int:
        return sum(1 for a in self._items if a.status == AppointmentStatus.cancelled)

    def summary(self, now: datetime) -> AppointmentSummary:
        return AppointmentSummary(
            active=self.active_count(now),
            completed=self.completed_count(),
            cancelled=self.cancelled_count(),
        )
