import pytest
from datetime import date, datetime, timedelta

from bookyz.errors import BookingFlowError, BookingIncomplete
from bookyz.schemas import AppointmentStatus, BookingStep

TODAY = date(2026, 10, 19)


def service_named(catalog, name):
    return next(s for s in catalog.services if s.name == name)


def book_through(flow, catalog, staff_id=2, service="תספורת", day=TODAY, slot="10:00"):
    flow.choose_staff(catalog.get_staff(staff_id))
    flow.choose_service(service_named(catalog, service))
    flow.choose_date(day)
    flow.choose_time(slot)


def test_new_flow_starts_at_staff_selection(flow):
    assert flow.step == BookingStep.selecting_staff
    assert flow.draft.staff is None
    assert flow.draft.service is None
    assert flow.draft.time is None
    assert flow.draft.date == TODAY


def test_full_booking_creates_one_confirmed_appointment(flow, catalog, store):
    book_through(flow, catalog)
    assert flow.step == BookingStep.confirming

    appt = flow.confirm()

    assert store.all() == [appt]
    assert appt.staff_id == 2
    assert appt.staff_name == "ירון"
    assert appt.service_name == "תספורת"
    assert appt.price == 80
    assert appt.date == TODAY
    assert appt.time == "10:00"
    assert appt.status == AppointmentStatus.confirmed

    # draft is empty again
    assert flow.step == BookingStep.selecting_staff
    assert flow.draft.staff is None
    assert flow.draft.service is None
    assert flow.draft.time is None
    assert flow.draft.date == TODAY


def test_appointment_keeps_catalog_values_from_selection_time(flow, catalog):
    staff = catalog.get_staff(2)
    service = service_named(catalog, "תספורת")
    flow.choose_staff(staff)
    flow.choose_service(service)

    staff.name = "Renamed"
    service.name = "Renamed cut"
    service.price = 999

    flow.choose_date(TODAY)
    flow.choose_time("10:00")
    appt = flow.confirm()

    assert appt.staff_name == "ירון"
    assert appt.service_name == "תספורת"
    assert appt.price == 80


def test_appointment_ids_are_unique(flow, catalog, store):
    for slot in ("10:00", "10:30", "11:00"):
        book_through(flow, catalog, slot=slot)
        flow.confirm()
    ids = [a.id for a in store.all()]
    assert len(set(ids)) == 3


def test_confirm_without_time_is_rejected_and_changes_nothing(flow, catalog, store):
    flow.choose_staff(catalog.get_staff(1))
    flow.choose_service(service_named(catalog, "All Scissors"))
    flow.choose_date(TODAY)
    before = flow.draft.model_copy()

    with pytest.raises(BookingIncomplete):
        flow.confirm()

    assert store.all() == []
    assert flow.step == BookingStep.selecting_time
    assert flow.draft == before


def test_confirm_on_fresh_flow_is_rejected(flow, store):
    with pytest.raises(BookingIncomplete):
        flow.confirm()
    assert store.all() == []


def test_transitions_out_of_order_are_rejected(flow, catalog):
    with pytest.raises(BookingFlowError):
        flow.choose_service(catalog.services[0])
    with pytest.raises(BookingFlowError):
        flow.choose_time("10:00")
    with pytest.raises(BookingFlowError):
        flow.choose_date(TODAY)

    flow.choose_staff(catalog.get_staff(1))
    with pytest.raises(BookingFlowError):
        flow.choose_staff(catalog.get_staff(2))
    assert flow.draft.staff.id == 1


def test_time_requires_date_step_first(flow, catalog):
    flow.choose_staff(catalog.get_staff(1))
    flow.choose_service(catalog.services[0])
    with pytest.raises(BookingFlowError):
        flow.choose_time("10:00")
    assert flow.step == BookingStep.selecting_date
    assert flow.draft.time is None


def test_past_date_is_rejected(flow, catalog):
    flow.choose_staff(catalog.get_staff(1))
    flow.choose_service(catalog.services[0])
    with pytest.raises(BookingFlowError):
        flow.choose_date(TODAY - timedelta(days=1))
    assert flow.step == BookingStep.selecting_date
    assert flow.draft.date == TODAY


def test_date_beyond_booking_window_is_rejected(flow, catalog):
    flow.choose_staff(catalog.get_staff(1))
    flow.choose_service(catalog.services[0])
    flow_last_day = TODAY + timedelta(days=6)
    with pytest.raises(BookingFlowError):
        flow.choose_date(TODAY + timedelta(days=7))
    assert flow.choose_date(flow_last_day) == BookingStep.selecting_time


def test_unknown_time_slot_is_rejected(flow, catalog):
    flow.choose_staff(catalog.get_staff(1))
    flow.choose_service(catalog.services[0])
    flow.choose_date(TODAY)
    with pytest.raises(BookingFlowError):
        flow.choose_time("15:00")
    assert flow.step == BookingStep.selecting_time


def test_go_back_after_service_clears_only_service(flow, catalog):
    flow.choose_staff(catalog.get_staff(3))
    flow.choose_service(catalog.services[1])

    assert flow.go_back() == BookingStep.selecting_service
    assert flow.draft.service is None
    assert flow.draft.staff.id == 3


def test_go_back_from_service_selection_returns_to_staff(flow, catalog):
    flow.choose_staff(catalog.get_staff(3))

    assert flow.go_back() == BookingStep.selecting_staff
    assert flow.draft.staff is None


def test_go_back_walks_the_whole_flow(flow, catalog):
    book_through(flow, catalog, day=TODAY + timedelta(days=2))

    assert flow.go_back() == BookingStep.selecting_time
    assert flow.draft.time is None
    assert flow.go_back() == BookingStep.selecting_date
    assert flow.draft.date == TODAY + timedelta(days=2)
    assert flow.go_back() == BookingStep.selecting_service
    assert flow.go_back() == BookingStep.selecting_staff


def test_go_back_at_first_step_signals_exit(flow):
    assert flow.go_back() is None
    assert flow.step == BookingStep.selecting_staff


def test_cancel_clears_draft_and_next_flow_is_fresh(flow, catalog, store):
    book_through(flow, catalog, day=TODAY + timedelta(days=1))
    flow.cancel()

    assert flow.step == BookingStep.selecting_staff
    assert flow.draft.staff is None
    assert flow.draft.service is None
    assert flow.draft.time is None
    assert flow.draft.date == TODAY
    assert store.all() == []

    flow.choose_staff(catalog.get_staff(5))
    assert flow.draft.service is None
    assert flow.draft.time is None
    assert flow.step == BookingStep.selecting_service


def test_start_with_staff_replaces_any_draft(flow, catalog):
    flow.choose_staff(catalog.get_staff(1))
    flow.choose_service(catalog.services[0])

    assert flow.start_with_staff(catalog.get_staff(3)) == BookingStep.selecting_service
    assert flow.draft.staff.id == 3
    assert flow.draft.service is None


def test_reschedule_replaces_original_on_confirm(flow, catalog, store):
    book_through(flow, catalog, slot="12:00")
    original = flow.confirm()

    assert flow.reschedule(original) == BookingStep.selecting_date
    assert flow.draft.staff.name == "ירון"
    assert flow.draft.service.name == "תספורת"
    assert store.all() == [original]

    flow.choose_date(TODAY + timedelta(days=1))
    flow.choose_time("11:30")
    new = flow.confirm()

    assert store.all() == [new]
    assert new.id != original.id
    assert new.time == "11:30"
    assert new.price == 80


def test_cancelled_reschedule_keeps_original(flow, catalog, store):
    book_through(flow, catalog)
    original = flow.confirm()
    flow.reschedule(original)
    flow.cancel()
    assert store.all() == [original]


def test_only_confirmed_appointments_can_be_rescheduled(flow, catalog, store):
    book_through(flow, catalog)
    appt = flow.confirm()
    store.update_status(appt.id, AppointmentStatus.cancelled)
    with pytest.raises(BookingFlowError):
        flow.reschedule(appt)


def test_subtitle_follows_the_flow(flow, catalog):
    flow.choose_staff(catalog.get_staff(2))
    assert flow.subtitle() == "בחרת את ירון ל"
    flow.choose_service(service_named(catalog, "תספורת"))
    assert flow.subtitle() == "בחרת את ירון לתספורת ב"


def test_slot_already_over_today_is_rejected(flow, catalog, store):
    # clock reads 09:45
    flow.choose_staff(catalog.get_staff(2))
    flow.choose_service(service_named(catalog, "תספורת"))
    flow.choose_date(TODAY)
    with pytest.raises(BookingFlowError):
        flow.choose_time("09:00")
    assert flow.step == BookingStep.selecting_time
    assert flow.draft.time is None

    flow.choose_time("10:00")
    flow.confirm()
    assert store.active_count(datetime(2026, 10, 19, 9, 45)) == 1


def test_early_slot_on_a_later_day_is_accepted(flow, catalog):
    flow.choose_staff(catalog.get_staff(2))
    flow.choose_service(catalog.services[0])
    flow.choose_date(TODAY + timedelta(days=1))
    assert flow.choose_time("09:00") == BookingStep.confirming


def test_reschedule_keeps_original_that_changed_status(flow, catalog, store):
    book_through(flow, catalog, slot="12:00")
    original = flow.confirm()
    flow.reschedule(original)
    store.update_status(original.id, AppointmentStatus.completed)

    flow.choose_date(TODAY + timedelta(days=1))
    flow.choose_time("11:30")
    with pytest.raises(BookingFlowError):
        flow.confirm()

    assert store.all() == [original]
    assert store.completed_count() == 1
    assert flow.step == BookingStep.confirming


def test_reschedule_of_deleted_appointment_still_books(flow, catalog, store):
    book_through(flow, catalog, slot="12:00")
    original = flow.confirm()
    flow.reschedule(original)
    store.remove(original.id)

    flow.choose_date(TODAY + timedelta(days=1))
    flow.choose_time("11:30")
    new = flow.confirm()
    assert store.all() == [new]
