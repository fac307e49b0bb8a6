# bookyz/routers/appointments_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from bookyz.appointments import display_status, format_date
from bookyz.deps import get_app_state, conflict, not_found
from bookyz.errors import BookingFlowError, NotFound
from bookyz.schemas import (
    AppointmentPublic,
    AppointmentStatus,
    AppointmentStatusUpdate,
    AppointmentSummary,
    BookingState,
)
from bookyz.state import AppState
from bookyz.routers.booking_routes import snapshot

router = APIRouter(
    prefix="/appointments",
    tags=["appointments"],
)


def to_public(appt, now) -> AppointmentPublic:
    return AppointmentPublic(
        **appt.model_dump(),
        display_status=display_status(appt, now),
        display_date=format_date(appt.date),
    )


@router.get("", response_model=List[AppointmentPublic])
def list_appointments(
    status: str = "all",
    state: AppState = Depends(get_app_state),
):
    if status not in ("confirmed", "completed", "cancelled", "all"):
        raise HTTPException(status_code=422, detail="status must be 'confirmed', 'completed', 'cancelled', or 'all'")

    now = state.now()
    appts = state.appointments.all()
    if status != "all":
        appts = [a for a in appts if a.status.value == status]
    # newest booking first
    appts.sort(key=lambda a: a.created_at, reverse=True)
    return [to_public(a, now) for a in appts]


@router.get("/summary", response_model=AppointmentSummary)
def appointments_summary(state: AppState = Depends(get_app_state)):
    return state.appointments.summary(state.now())


@router.get("/{appt_id}", response_model=AppointmentPublic)
def get_appointment(appt_id: str, state: AppState = Depends(get_app_state)):
    try:
        appt = state.appointments.get(appt_id)
    except NotFound as exc:
        raise not_found(exc)
    return to_public(appt, state.now())


@router.patch("/{appt_id}/status", response_model=AppointmentPublic)
def update_status(appt_id: str, body: AppointmentStatusUpdate, state: AppState = Depends(get_app_state)):
    try:
        appt = state.appointments.update_status(appt_id, body.status)
    except NotFound as exc:
        raise not_found(exc)
    return to_public(appt, state.now())


@router.patch("/{appt_id}/cancel", response_model=AppointmentPublic)
def cancel_appointment(appt_id: str, state: AppState = Depends(get_app_state)):
    try:
        appt = state.appointments.get(appt_id)
        if appt.status == AppointmentStatus.cancelled:
            raise BookingFlowError("Appointment already cancelled")
        if appt.status != AppointmentStatus.confirmed:
            raise BookingFlowError("Only confirmed appointments can be cancelled")
        appt = state.appointments.update_status(appt_id, AppointmentStatus.cancelled)
    except NotFound as exc:
        raise not_found(exc)
    except BookingFlowError as exc:
        raise conflict(exc)
    return to_public(appt, state.now())


@router.post("/{appt_id}/reschedule", response_model=BookingState)
def reschedule_appointment(appt_id: str, state: AppState = Depends(get_app_state)):
    try:
        appt = state.appointments.get(appt_id)
        state.flow.reschedule(appt)
    except NotFound as exc:
        raise not_found(exc)
    except BookingFlowError as exc:
        raise conflict(exc)
    return snapshot(state)


@router.delete("/{appt_id}", status_code=204)
def delete_appointment(appt_id: str, state: AppState = Depends(get_app_state)):
    try:
        state.appointments.remove(appt_id)
    except NotFound as exc:
        raise not_found(exc)
