# bookyz/booking.py

import logging
from datetime import datetime, date, time, timedelta
from typing import Callable, Optional

from .appointments import AppointmentStore
from .catalog import Catalog
from .errors import BookingFlowError, BookingIncomplete
from .schemas import (
    Appointment, AppointmentStatus, BookingDraft, BookingStep,
    Service, StaffMember,
)

log = logging.getLogger(__name__)


class BookingFlow:
    """
    Booking wizard: staff -> service -> date -> time -> confirm.

    The step is kept explicitly and always agrees with the draft:
    staff unset => selecting_staff, service unset => selecting_service,
    date not yet chosen => selecting_date, time unset => selecting_time,
    everything set => confirming. Every transition checks the step first
    and leaves the flow untouched when it raises.
    """

    def __init__(self, catalog: Catalog, store: AppointmentStore, clock: Callable[[], datetime] = datetime.now):
        self.catalog = catalog
        self.store = store
        self.clock = clock
        self.step = BookingStep.selecting_staff
        self.draft = self._empty_draft()

    def _today(self) -> date:
        return self.clock().date()

    def _empty_draft(self) -> BookingDraft:
        return BookingDraft(date=self._today())

    def _require(self, step: BookingStep) -> None:
        if self.step != step:
            raise BookingFlowError(f"Cannot do that while {self.step.value}")

    # ---------- forward transitions ----------

    def choose_staff(self, staff: StaffMember) -> BookingStep:
        self._require(BookingStep.selecting_staff)
        # snapshot so later catalog edits don't leak into the booking
        self.draft.staff = staff.model_copy(deep=True)
        self.step = BookingStep.selecting_service
        log.debug("Staff chosen: %s", staff.name)
        return self.step

    def choose_service(self, service: Service) -> BookingStep:
        self._require(BookingStep.selecting_service)
        if self.draft.staff is None:
            raise BookingFlowError("Choose a staff member first")
        self.draft.service = service.model_copy(deep=True)
        self.step = BookingStep.selecting_date
        log.debug("Service chosen: %s", service.name)
        return self.step

    def choose_date(self, day: date) -> BookingStep:
        self._require(BookingStep.selecting_date)
        today = self._today()
        if day < today:
            raise BookingFlowError("Cannot book a date in the past")
        last_day = today + timedelta(days=self.catalog.settings.booking_days_ahead - 1)
        if day > last_day:
            raise BookingFlowError("Date is outside the booking window")
        self.draft.date = day
        self.step = BookingStep.selecting_time
        log.debug("Date chosen: %s", day)
        return self.step

    def choose_time(self, slot: str) -> BookingStep:
        self._require(BookingStep.selecting_time)
        if self.draft.staff is None or self.draft.service is None:
            raise BookingFlowError("Choose staff and service first")
        if slot not in self.catalog.time_slots:
            raise BookingFlowError(f"Unknown time slot {slot}")
        if datetime.combine(self.draft.date, time.fromisoformat(slot)) < self.clock():
            raise BookingFlowError("Cannot book an appointment in the past")
        self.draft.time = slot
        self.step = BookingStep.confirming
        log.debug("Time chosen: %s", slot)
        return self.step

    def confirm(self) -> Appointment:
        draft = self.draft
        if (
            self.step != BookingStep.confirming
            or draft.staff is None
            or draft.service is None
            or draft.time is None
        ):
            raise BookingIncomplete("Staff, service, date and time must all be chosen before confirming")

        # a reschedule only replaces an appointment that is still confirmed
        old_id = draft.rescheduling_id
        if old_id is not None and any(a.id == old_id for a in self.store.all()):
            if self.store.get(old_id).status != AppointmentStatus.confirmed:
                raise BookingFlowError("The appointment being rescheduled is no longer confirmed")
        else:
            old_id = None

        appt = Appointment(
            staff_id=draft.staff.id,
            staff_name=draft.staff.name,
            service_name=draft.service.name,
            price=draft.service.price,
            date=draft.date,
            time=draft.time,
            status=AppointmentStatus.confirmed,
            created_at=self.clock(),
        )
        self.store.add(appt)
        if old_id is not None:
            self.store.remove(old_id)
            log.info("Appointment %s rescheduled as %s", old_id, appt.id)
        log.info("Booked %s with %s on %s at %s", appt.service_name, appt.staff_name, appt.date, appt.time)
        self.reset()
        return appt

    # ---------- backward transitions ----------

    def go_back(self) -> Optional[BookingStep]:
        """Undo the last choice. Returns None when already at the first step (exit the flow)."""
        if self.step == BookingStep.confirming:
            self.draft.time = None
            self.step = BookingStep.selecting_time
        elif self.step == BookingStep.selecting_time:
            # date always keeps a value, only the screen moves back
            self.step = BookingStep.selecting_date
        elif self.step == BookingStep.selecting_date:
            self.draft.service = None
            self.step = BookingStep.selecting_service
        elif self.step == BookingStep.selecting_service:
            self.draft.staff = None
            self.step = BookingStep.selecting_staff
        else:
            return None
        return self.step

    def cancel(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.draft = self._empty_draft()
        self.step = BookingStep.selecting_staff

    # ---------- entry points ----------

    def start_with_staff(self, staff: StaffMember) -> BookingStep:
        """Book straight from a staff member's story viewer."""
        self.reset()
        return self.choose_staff(staff)

    def reschedule(self, appt: Appointment) -> BookingStep:
        """Start a new booking prefilled from an existing one, at date selection.

        The original appointment is replaced only when the new one is confirmed.
        """
        if appt.status != AppointmentStatus.confirmed:
            raise BookingFlowError("Only confirmed appointments can be rescheduled")
        staff = self.catalog.get_staff(appt.staff_id).model_copy(deep=True)
        staff.name = appt.staff_name
        service = next(
            (s for s in self.catalog.services if s.name == appt.service_name),
            None,
        )
        if service is None:
            raise BookingFlowError(f"Service {appt.service_name} is no longer offered")
        service = service.model_copy(update={"price": appt.price}, deep=True)

        self.reset()
        self.draft.staff = staff
        self.draft.service = service
        self.draft.rescheduling_id = appt.id
        self.step = BookingStep.selecting_date
        return self.step

    # ---------- presentation ----------

    def subtitle(self) -> str:
        staff = self.draft.staff.name if self.draft.staff else ""
        service = self.draft.service.name if self.draft.service else ""
        if self.step == BookingStep.selecting_service:
            return f"בחרת את {staff} ל"
        if self.step == BookingStep.selecting_date:
            return f"בחרת את {staff} ל{service} ב"
        if self.step == BookingStep.selecting_time:
            return "בחר שעה להזמנה"
        if self.step == BookingStep.confirming:
            return f"{service} אצל {staff}, {self.draft.date.strftime('%d.%m')} בשעה {self.draft.time}"
        return "בחר איש צוות"
