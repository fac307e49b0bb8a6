# bookyz/routers/booking_routes.py

from fastapi import APIRouter, Depends

from bookyz.deps import get_app_state, conflict, not_found
from bookyz.errors import BookingFlowError, NotFound
from bookyz.schemas import (
    Appointment,
    BookingState,
    ChooseDate,
    ChooseService,
    ChooseStaff,
    ChooseTime,
)
from bookyz.state import AppState

router = APIRouter(
    prefix="/booking",
    tags=["booking"],
)


def snapshot(state: AppState, exited: bool = False) -> BookingState:
    flow = state.flow
    return BookingState(step=flow.step, draft=flow.draft, subtitle=flow.subtitle(), exited=exited)


@router.get("", response_model=BookingState)
def current_booking(state: AppState = Depends(get_app_state)):
    return snapshot(state)


@router.post("/staff", response_model=BookingState)
def choose_staff(body: ChooseStaff, state: AppState = Depends(get_app_state)):
    try:
        staff = state.catalog.get_staff(body.staff_id)
        state.flow.choose_staff(staff)
    except NotFound as exc:
        raise not_found(exc)
    except BookingFlowError as exc:
        raise conflict(exc)
    return snapshot(state)


@router.post("/service", response_model=BookingState)
def choose_service(body: ChooseService, state: AppState = Depends(get_app_state)):
    try:
        service = state.catalog.get_service(body.service_id)
        state.flow.choose_service(service)
    except NotFound as exc:
        raise not_found(exc)
    except BookingFlowError as exc:
        raise conflict(exc)
    return snapshot(state)


@router.post("/date", response_model=BookingState)
def choose_date(body: ChooseDate, state: AppState = Depends(get_app_state)):
    try:
        state.flow.choose_date(body.date)
    except BookingFlowError as exc:
        raise conflict(exc)
    return snapshot(state)


@router.post("/time", response_model=BookingState)
def choose_time(body: ChooseTime, state: AppState = Depends(get_app_state)):
    try:
        state.flow.choose_time(body.time)
    except BookingFlowError as exc:
        raise conflict(exc)
    return snapshot(state)


@router.post("/confirm", response_model=Appointment, status_code=201)
def confirm_booking(state: AppState = Depends(get_app_state)):
    try:
        return state.flow.confirm()
    except BookingFlowError as exc:
        raise conflict(exc)


@router.post("/back", response_model=BookingState)
def go_back(state: AppState = Depends(get_app_state)):
    step = state.flow.go_back()
    return snapshot(state, exited=step is None)


@router.post("/cancel", response_model=BookingState)
def cancel_booking(state: AppState = Depends(get_app_state)):
    state.flow.cancel()
    return snapshot(state, exited=True)
